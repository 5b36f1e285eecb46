import logging

from rich.console import Console
from rich.logging import RichHandler

from fruitstand import create_app
from fruitstand.config import load_settings


console = Console()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with Rich handler."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


settings = load_settings()
setup_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    logging.getLogger(__name__).info("Listening on port %s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
