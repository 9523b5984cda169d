import logging
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from kuhn3p.cards import card_to_rank, rank_to_card
from kuhn3p.constants import NUM_PLAYERS, NUM_RANKS, NUM_SITUATIONS, PARAM_NAMES, ActionType
from kuhn3p.errors import ConstructionError
from kuhn3p.game import legal_actions
from kuhn3p.player import EquilibriumPlayer
from kuhn3p.strategy import seat_strategy, strategy_grid
from kuhn3p.types import MatchStateView

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# --- Pydantic Models ---
class StrategyRequest(BaseModel):
    params: Dict[str, float] = {}  # strategy parameters by name, e.g. {"c11": 0.25, "b11": 0.1}
    seat: int
    card: str  # one of "J", "Q", "K", "A"
    history: List[str] = []  # e.g. ["CHECK", "BET"]
    seed: Optional[int] = None  # if provided, one action is sampled


class StrategyResponse(BaseModel):
    strategy: Dict[str, float]  # Action -> Probability
    legal_actions: List[str]
    situation: int
    family: int
    sampled_action: Optional[str] = None


class GridRequest(BaseModel):
    params: Dict[str, float] = {}


class GridResponse(BaseModel):
    family: int
    params: Dict[str, float]
    grid: Dict[str, Dict[str, Dict[str, Dict[str, float]]]]  # seat -> situation -> card -> action -> prob


# --- Action Mapping ---
ACTION_MAP = {
    "FOLD": ActionType.FOLD,
    "CHECK": ActionType.CALL,
    "CALL": ActionType.CALL,
    "BET": ActionType.RAISE,
    "RAISE": ActionType.RAISE,
}


def parse_action(action_str: str) -> ActionType:
    norm = action_str.strip().upper()
    if norm in ACTION_MAP:
        return ACTION_MAP[norm]
    raise ValueError(f"Unknown action: {action_str}")


def _build_player(params: Dict[str, float], seed: int) -> EquilibriumPlayer:
    unknown = sorted(set(params) - set(PARAM_NAMES))
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown strategy parameters: {unknown}")
    try:
        return EquilibriumPlayer.from_named_params(seed=seed, **params)
    except ConstructionError as e:
        raise HTTPException(status_code=400, detail=f"{e.kind.value}: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# --- Application ---
app = FastAPI(title="kuhn3p")


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/strategy", response_model=StrategyResponse)
def get_strategy(req: StrategyRequest) -> StrategyResponse:
    player = _build_player(req.params, req.seed if req.seed is not None else 0)

    try:
        history = [parse_action(a) for a in req.history]
        view = MatchStateView(seat=req.seat, card_rank=card_to_rank(req.card), history=history)
        strategy = seat_strategy(view.seat)
        probs = player.action_probs(view)
        situation = strategy.classify(history)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    sampled = None
    if req.seed is not None:
        sampled = player.action(view).action_type.name

    logger.info("seat %d card %s history %s -> situation %d", req.seat, req.card, req.history, situation)
    return StrategyResponse(
        strategy={a.name: float(probs[a]) for a in ActionType},
        legal_actions=[a.name for a in legal_actions(history)],
        situation=situation,
        family=int(player.family),
        sampled_action=sampled,
    )


@app.post("/grid", response_model=GridResponse)
def get_grid(req: GridRequest) -> GridResponse:
    player = _build_player(req.params, 0)
    grid = strategy_grid(player.params)

    data: Dict[str, Dict[str, Dict[str, Dict[str, float]]]] = {}
    for seat in range(NUM_PLAYERS):
        seat_data = data.setdefault(str(seat), {})
        for situation in range(NUM_SITUATIONS):
            sit_data = seat_data.setdefault(str(situation + 1), {})
            for rank in range(NUM_RANKS):
                sit_data[rank_to_card(rank)] = {a.name: float(grid[seat, situation, rank, a]) for a in ActionType}

    return GridResponse(family=int(player.family), params=player.params.as_dict(), grid=data)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
