import json
import sys

import settings


def main(base_url: str):
    settings.ENVIRONMENT = "production"
    settings.API_BASE_URL = base_url

    import app

    docs = app.app.openapi()
    with open("scripts/openapi.json", "w", encoding="utf-8") as f:
        f.write(json.dumps(docs, indent=2))


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "https://rapidjobs.app")
