"""Service layer wiring the rule engine to persistence.

Production Usage:
    from lexiboard.factory import create_game_service
    service = create_game_service()
    session = await service.start_game("g1", ["alice", "bob"])

Testing Usage:
    service = GameService(GameRegistry(rng_factory=...), JsonGameRepository(tmp_path))
"""

from lexiboard.services.game_service import GameNotFoundError, GameService, MoveReport

__all__ = [
    "GameNotFoundError",
    "GameService",
    "MoveReport",
]
