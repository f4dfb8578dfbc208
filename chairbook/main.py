import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chairbook.core import config
from chairbook.routes import availability_routes, booking_routes

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def check_configuration() -> None:
    try:
        config.validate_runtime_config()
    except RuntimeError:
        logger.exception('Invalid runtime configuration. Check the environment or .env file.')
        raise


@app.get('/')
def root():
    return {'status': 'Chair Scheduling API Running'}


app.include_router(availability_routes.router, prefix='/availability')
app.include_router(booking_routes.router, prefix='/bookings')
