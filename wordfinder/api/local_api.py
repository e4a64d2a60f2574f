from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ..config import MAX_RESULTS
from ..errors import InvalidInput
from ..grid.matrix import Grid
from ..logging_utils import get_logger
from ..search.ranking import rank_words

logger = get_logger()

app = FastAPI(title="wordfinder")


class FindRequest(BaseModel):
    grid: List[str]  # row strings
    words: List[str]
    top: Optional[int] = None


class FindResponse(BaseModel):
    words: List[str]
    scores: Dict[str, int]
    rows: int
    columns: int


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}


@app.post("/api/find", response_model=FindResponse)
async def api_find(request: FindRequest):
    """
    Find API endpoint.
    Builds the grid from row strings and returns the most frequent words.
    """
    try:
        grid = Grid.from_rows(request.grid)
    except InvalidInput as e:
        logger.info("Rejected grid: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    top = MAX_RESULTS if request.top is None else request.top
    ranked = rank_words(grid, request.words, max_results=top)
    logger.info(
        "Searched %d words in a %dx%d grid, %d found",
        len(request.words), grid.rows, grid.columns, len(ranked),
    )
    return FindResponse(
        words=[e.word for e in ranked],
        scores={e.word: e.score for e in ranked},
        rows=grid.rows,
        columns=grid.columns,
    )
