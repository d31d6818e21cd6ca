#run: python -m wangku   (or flask --app "wangku.app:create_app" run --debug)

import logging

from wangku.app import create_app
from wangku.config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    app.run(port=settings.port, debug=settings.log_level == "DEBUG")


if __name__ == "__main__":
    main()
