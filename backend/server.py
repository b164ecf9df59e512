#setup: pip install -e ".[test]"
#setup: flask --app backend.server run --port 5000 --debug

from backend.app import create_app
from backend.config import AppConfig

config = AppConfig()
app = create_app(config)


if __name__ == "__main__":
    app.run(port=config.port, debug=config.debug)
