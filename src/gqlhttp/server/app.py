from gqlhttp.config import Config
from gqlhttp.server.starlette import create_app

CONFIG = Config.from_environ()

APP = create_app(
    schema=CONFIG.load_schema(),
    path=CONFIG.path,
    pretty=CONFIG.pretty,
    on_response=CONFIG.load_on_response(),
    max_body_size=CONFIG.max_body_size,
)
