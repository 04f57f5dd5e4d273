"""
Initialize the Sanic app, connect to Firestore on startup and register the REST routes.
"""
import logging
from logging import getLogger

from sanic import Sanic

from firestore_probe.clients.firestore import initialize_firestore
from firestore_probe.config import ServerConfig
from firestore_probe.rest.controllers import register_routes

# set the logging level based on an env var
logging.basicConfig(level=ServerConfig.log_level)

logger = getLogger(__name__)

api = Sanic(name="firestore_probe")


async def init_firestore(app: Sanic, _loop=None) -> None:
    """
    Build the Firestore context before the server accepts traffic.

    Errors are not caught here: a failed bootstrap stops the server from starting.
    """
    app.ctx.firestore = initialize_firestore()


api.register_listener(init_firestore, "before_server_start")
register_routes(api)


if __name__ == "__main__":
    api.run(host=ServerConfig.host, port=ServerConfig.port, single_process=True)
