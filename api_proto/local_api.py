from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import sys
import os
import traceback
from typing import List, Optional, Union

# プロジェクトルートをパスに追加して sudoku_solver をインポート可能にする
# このファイルは api_proto/local_api.py なので、親ディレクトリがルート
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sudoku_solver import GridFormatError, is_valid_solution, normalize_grid, solve_board
from sudoku_solver.config import DEFAULT_STRATEGY
from sudoku_solver.logging_utils import get_logger

logger = get_logger()

app = FastAPI()

Cell = Optional[Union[int, str]]


class SolveRequest(BaseModel):
    board: List[List[Cell]]  # 9x9, 空きマスは 0 / "" / "." / null
    strategy: str = DEFAULT_STRATEGY


class ValidateRequest(BaseModel):
    board: List[List[Cell]]


@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array), normalizes it, and calls solver logic.
    Plain def: FastAPI runs it in its threadpool, off the event loop.
    """
    try:
        return solve_board(request.board, strategy=request.strategy)
    except ValueError as e:
        # GridFormatError / 未知の戦略名は入力側の問題
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Solve failed:\n%s", traceback.format_exc())
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/validate")
def api_validate(request: ValidateRequest):
    """
    Validation API endpoint.
    Returns whether the board is a complete, correct solution.
    """
    try:
        grid = normalize_grid(request.board)
    except GridFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"valid": is_valid_solution(grid)}
