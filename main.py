import os

import uvicorn

from imagegen.bootstrap.bootstrapper import bootstrap_app
from imagegen.config.settings import Settings
from imagegen.dependencies.components import get_components


def main():
    env = os.getenv("APP_ENV", "development")
    app = bootstrap_app(env=env)
    settings = get_components(env=env).get_component(Settings)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
