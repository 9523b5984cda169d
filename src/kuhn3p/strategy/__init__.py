from .seats import (
    SEAT_STRATEGIES,
    Seat0Strategy,
    Seat1Strategy,
    Seat2Strategy,
    SeatStrategy,
    seat_strategy,
    strategy_grid,
)

__all__ = [
    "SEAT_STRATEGIES",
    "Seat0Strategy",
    "Seat1Strategy",
    "Seat2Strategy",
    "SeatStrategy",
    "seat_strategy",
    "strategy_grid",
]
