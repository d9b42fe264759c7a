import logging

from .cli import BankMenu
from .core.config import get_settings
from .core.dependencies import get_registry


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    BankMenu(get_registry(), settings=settings).run()


if __name__ == "__main__":
    main()
