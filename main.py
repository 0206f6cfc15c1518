from __future__ import annotations

from pathlib import Path

from loguru import logger

from app.viewmodels.catalog_vm import CatalogVM
from app.views.console_menu import ConsoleMenu
from infrastructure.catalog_store import CatalogStore
from infrastructure.logging import find_latest_log_file, init_logging
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = init_logging(settings.log_dir(), level=settings.log_level())

    data_file = settings.data_file_path()
    logger.info("Starting photo catalog with data file {}", data_file)
    store = CatalogStore(data_file)
    vm = CatalogVM(store)

    exit_code = ConsoleMenu(vm).run()

    logger.info("Photo catalog closed with {} photos", store.get_total_count())
    logger.complete()
    latest = find_latest_log_file(str(log_dir))
    if latest is not None:
        print(f"Log file: {latest}")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
