import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import convert, health, rates
from config.logging_config import setup_logging
from config.settings import get_settings

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	setup_logging(
		level=settings.LOG_LEVEL,
		json_output=settings.LOG_JSON,
		log_directory=settings.LOG_DIRECTORY,
	)
	logger.info(f'Starting {settings.APP_NAME}...')

	await init_dependencies(settings)
	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.ALLOWED_ORIGINS,
	allow_credentials=True,
	allow_methods=['GET', 'POST', 'OPTIONS'],
	allow_headers=['*'],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception: {exc}', exc_info=True)
	return JSONResponse(status_code=500, content={'detail': 'Internal server error'})


@app.get('/', summary='API information')
async def root():
	return {
		'name': settings.APP_NAME,
		'endpoints': {
			'health': '/health',
			'currencies': '/api/v1/currencies',
			'rates': '/api/v1/rates?base=USD',
			'latest_rate': '/api/v1/rates/{base}/{target}',
			'historical_rate': '/api/v1/rates/{base}/{target}/{date}',
			'timeseries': '/api/v1/timeseries/{base}/{target}?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD',
			'convert': 'POST /api/v1/convert',
			'documentation': '/docs',
		},
	}


app.include_router(health.router)
app.include_router(rates.router)
app.include_router(convert.router)
register_exception_handlers(app)


if __name__ == '__main__':
	import uvicorn

	uvicorn.run('api.main:app', host='0.0.0.0', port=8000)
