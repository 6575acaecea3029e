# -*- coding: utf-8 -*-
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from city_search.container import get_container
from city_search.io.terminal import run_session
from city_search.monitoring import configure_logging
from city_search.services import CityLookupController


def main() -> None:
    container = get_container()
    configure_logging(container.config.observability)
    run_session(container.resolve(CityLookupController))


if __name__ == "__main__":
    main()
