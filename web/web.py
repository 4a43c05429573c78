"""HTTP API for generating decks from the bundled maps."""
import logging as log
import os
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse

# Add parent directory to path so the project packages import when run directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from devtools.map_dump import DEFAULT_TIMEZONE, dump_level, render_map
from flags import Flags
from levelgen.level_generator import LevelGenerator
from levelgen.state import LevelState
from levelgen.validator import LevelValidator
from version import __version__
from world.map_loader import load_map_file

DEFAULT_MAPS_DIR = Path(__file__).resolve().parents[1] / "maps"
MAP_SUFFIX = ".txt"


def _list_maps(maps_dir: Path):
    return sorted(path.stem for path in maps_dir.glob(f"*{MAP_SUFFIX}"))


def _generate(maps_dir: Path, map_name: str, seed: int, level: int) -> LevelState:
    if map_name not in _list_maps(maps_dir):
        raise HTTPException(status_code=404, detail=f"Map '{map_name}' not found")
    try:
        grid = load_map_file(maps_dir / f"{map_name}{MAP_SUFFIX}")
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    problem = grid.Validate()
    if problem:
        raise HTTPException(status_code=422, detail=problem)
    return LevelGenerator(grid, seed, level, Flags()).Generate()


def create_app(maps_dir: Optional[Path] = None) -> FastAPI:
    maps_dir = Path(maps_dir or os.environ.get("STATION_MAPS_DIR", DEFAULT_MAPS_DIR))
    app = FastAPI(title="Station Populator", version=__version__)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    @app.get("/api/maps")
    async def list_maps():
        return {"maps": _list_maps(maps_dir)}

    @app.get("/api/levels/{map_name}")
    def generate_level(map_name: str, seed: int = Query(...), level: int = Query(1, ge=1)):
        """Generate a deck and report its hints, layout and validation result."""
        state = _generate(maps_dir, map_name, seed, level)
        problems = LevelValidator(state).GetProblems()
        return {
            "map": map_name,
            "seed": seed,
            "level": level,
            "hints": state.hints,
            "rows": render_map(state),
            "problems": problems,
            "valid": not problems,
        }

    @app.get("/api/levels/{map_name}/dump", response_class=PlainTextResponse)
    def dump(map_name: str, seed: int = Query(...), level: int = Query(1, ge=1)):
        state = _generate(maps_dir, map_name, seed, level)
        return dump_level(state, DEFAULT_TIMEZONE)

    return app


def main() -> None:
    import uvicorn

    log.basicConfig(
        level=log.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    port = int(os.environ.get("PORT", 8000))
    log.info(f"Serving maps from {os.environ.get('STATION_MAPS_DIR', DEFAULT_MAPS_DIR)} on port {port}")
    uvicorn.run(create_app(), host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
