from fastapi import Response
from pydantic import BaseModel
from typing import Dict
from fastapi.encoders import jsonable_encoder
import json

class MessageResponse(BaseModel):
    message:str
    success:bool

class VersionResponse(BaseModel):
    name:str
    apiVersion:str
    success:bool

def prepareResponse(result:Dict, callback:str = None):
    '''
    Wrap result as JSONP when a callback name is given
    '''
    if callback:
        content = "{}({});".format(callback, json.dumps(jsonable_encoder(result)))
        return Response(content=content, media_type="text/javascript")
    return result
