# FastAPI and ASGI:
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# logging:
import logging
LOG_TO_FILE = True
LOG_FILE = 'S46-Switch-Control.log'
LOG_LEVEL = logging.INFO

logger = logging.getLogger("S46-Switch-Control")
logger.setLevel(LOG_LEVEL)
if LOG_TO_FILE:
    handler = logging.FileHandler(LOG_FILE)
else:
    handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(fmt = '%(asctime)s %(levelname)s:%(message)s'))
logger.addHandler(handler)

logger2 = logging.getLogger("S46-Instr")
logger2.setLevel(LOG_LEVEL)
logger2.addHandler(handler)

# Imports for this app:
from app.schemas.Response import MessageResponse, VersionResponse, prepareResponse
from app.routers.RFSwitch import router as rfSwitchRouter

# globals:
tags_metadata = [
    {
        "name": "API",
        "description": "info about this API"
    },
    {
        "name": "RF switch",
        "description": "Keithley S46 RF switch"
    }
]

app = FastAPI(openapi_tags=tags_metadata)
app.include_router(rfSwitchRouter, tags=["RF switch"])

API_VERSION = "0.1.0"

# set up CORSMiddleware to allow local development:
app.add_middleware(
    CORSMiddleware,
    allow_origins = ["http://localhost:3000"],
    allow_credentials = True,
    allow_methods = ["*"],
    allow_headers = ["*"]
)

@app.get("/", tags=["API"], response_model = MessageResponse)
async def get_Root(callback:str = None):
    '''
    Hello world
    :return MessageResponse
    '''
    result = MessageResponse(message = 'S46-Switch-Control API version ' + API_VERSION + '. See /docs', success = True)
    return prepareResponse(result, callback)

@app.get("/version", tags=["API"], response_model = VersionResponse)
async def get_API_Version(callback:str = None):
    '''
    Get the version information for this API
    :param callback: optional name of Javascript function to wrap JSONP results in.
    :return VersionResponse
    '''
    result = VersionResponse(name = "S46-Switch-Control API",
                             apiVersion = API_VERSION,
                             success = True)
    return prepareResponse(result, callback)

if __name__ == "__main__":
    logger.info("---- S46-Switch-Control start ----")
    uvicorn.run(app, host="0.0.0.0", port=8000)
