"""GraphQL documents sent to the tournament service."""

GET_TOURNAMENTS = """
query GetTournaments {
    tournamentsAll {
        id
        name
        modType
        gameType
        withBargains
        withBargainsColor
        withForeignHeroes
    }
}
"""

GET_TOURNAMENT = """
query GetTournament($id: UUID) {
    tournament(id: $id) {
        id
        name
        modType
        gameType
        withBargains
        withBargainsColor
        withForeignHeroes
    }
}
"""

GET_USERS = """
query GetUsers($tournamentId: UUID!) {
    users(tournamentId: $tournamentId) {
        id
        nickname
    }
}
"""

GET_MATCHES = """
query GetMatches($tournamentId: UUID!, $userId: UUID) {
    matches(tournamentId: $tournamentId, userId: $userId) {
        id
        tournamentId
        firstPlayer
        secondPlayer
    }
}
"""

GET_GAMES = """
query GetGames($matchId: UUID!) {
    games(matchId: $matchId) {
        id
        matchId
        firstPlayerRace
        firstPlayerHero
        secondPlayerRace
        secondPlayerHero
        bargainsColor
        bargainsAmount
        result
        outcome
    }
}
"""

GET_HEROES = """
query GetHeroes($modType: ModType!) {
    heroesNew(modType: $modType) {
        heroes {
            entities {
                id
                name
                race
            }
        }
    }
}
"""
