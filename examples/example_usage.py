"""Example: use the service layer without Flask.

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from shift_tracker.common.formatting import format_currency, format_hours
from shift_tracker.config import get_settings_module
from shift_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    stats = container.statistics_service.dashboard(container.shifts_repo.list_all())
    print("Total earnings:", format_currency(stats.total_earnings))
    print("Total hours:", format_hours(stats.total_hours))
    print("This week:", format_currency(stats.this_week_earnings))
    for row in container.shift_service.list_for_display()[:5]:
        print(row["date"], row["location"], row["total"])


if __name__ == "__main__":
    main()
