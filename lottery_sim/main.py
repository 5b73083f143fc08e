import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from lottery_sim.load_settings import host, log_level, port, stats_file_path
from lottery_sim.routers import simulate
from lottery_sim.services.statistics_loader import load_weight_table_or_fallback

logging.basicConfig(level=log_level)


def create_app(stats_file: str | None = None) -> FastAPI:
    """Create the lottery simulator app.

    The weight table is loaded once, before the app starts serving requests.
    """
    if stats_file is None:
        stats_file = stats_file_path

    @asynccontextmanager
    async def lifespan(app):
        """Load the digit statistics, or the default weights if that fails.
        This function is called to start the server.
        """
        app.state.weight_table = load_weight_table_or_fallback(stats_file)
        try:
            yield
        finally:
            logging.info("Stop Server")

    app = FastAPI(lifespan=lifespan)
    app.include_router(simulate.simulate_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=host, port=port)
