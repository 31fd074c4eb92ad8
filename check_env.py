#!/usr/bin/env python3
"""Check the Google Maps configuration and create a template .env when missing."""

import os
import sys
from pathlib import Path

TEMPLATE = """# Google Maps web services key (Directions, Geocoding, Places)
ROUTEPLANNER_GOOGLE_MAPS_API_KEY=your-server-key-here
ROUTEPLANNER_GOOGLE_MAPS_LANGUAGE=es
ROUTEPLANNER_GOOGLE_MAPS_REGION=UY

# API Configuration
ROUTEPLANNER_API_PREFIX=
ROUTEPLANNER_LOG_LEVEL=INFO
# JSON array or comma-separated: http://localhost:5173,http://127.0.0.1:5173
# ROUTEPLANNER_FRONTEND_ALLOWED_ORIGINS=
"""


def _mask(value: str) -> str:
    return value[:6] + "..." + value[-4:] if len(value) > 12 else "***"


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Route planner environment checker")
    print("=" * 60)

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"❌ .env file NOT found; created a template at: {env_file}")
        print("⚠️  Edit it and set ROUTEPLANNER_GOOGLE_MAPS_API_KEY")
        return 1
    print(f"✅ Found .env file at: {env_file}")

    from_env = os.getenv("ROUTEPLANNER_GOOGLE_MAPS_API_KEY")
    if from_env:
        print(f"✅ ROUTEPLANNER_GOOGLE_MAPS_API_KEY (from environment): {_mask(from_env)}")

    sys.path.insert(0, str(project_root / "src"))
    from routeplanner.config import settings

    if settings.google_maps_api_key:
        print(f"✅ Google Maps key loaded: {_mask(settings.google_maps_api_key)}")
        print(f"   language={settings.google_maps_language} region={settings.google_maps_region}")
        return 0

    print("❌ Google Maps key is NOT configured")
    print("   /calculate-route, /geocode and /places/* will answer 503 until it is set.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
