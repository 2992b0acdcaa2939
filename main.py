"""Main entry point for SiteRisk."""

import sys

from loguru import logger

from siterisk.utils.logger import setup_logging


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print("Usage: python main.py [api|assess LAT LNG [BASE_COST]|zones]")
        sys.exit(1)

    setup_logging()
    cmd = sys.argv[1]

    if cmd == "api":
        import uvicorn
        from siterisk.utils.config import settings
        logger.info("Starting API server...")
        uvicorn.run(
            "siterisk.api.main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.api.reload,
        )

    elif cmd == "assess":
        if len(sys.argv) < 4:
            print("Usage: python main.py assess LAT LNG [BASE_COST]")
            sys.exit(1)
        from siterisk.core.assessor import SiteAssessor
        from siterisk.core.formatter import format_output
        from siterisk.geo.models import Point
        try:
            point = Point(lat=float(sys.argv[2]), lng=float(sys.argv[3]))
            base_cost = float(sys.argv[4]) if len(sys.argv) > 4 else None
        except ValueError:
            print("LAT, LNG and BASE_COST must be numbers")
            sys.exit(1)
        result = SiteAssessor().assess(point, base_cost=base_cost, fetch_external=True)
        print(format_output(result, "summary"))

    elif cmd == "zones":
        from siterisk.core.zones import list_zones
        for info in list_zones():
            print(f"{info.zone:<8} {info.pga:<12} {info.risk_level:<10} x{info.cost_multiplier:.2f}")

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
