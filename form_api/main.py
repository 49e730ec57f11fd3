from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from form_api.config import LOG_LEVEL
from form_api.routers import (
    form_fields,
    system,
)
from form_api.services.form_fields import FormFieldsError

import logging

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)

app = FastAPI(title="Form Fields API")
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FormFieldsError)
async def form_fields_error_handler(request: Request, exc: FormFieldsError):
    content = {"message": exc.message}
    if exc.expose_cause and exc.cause is not None:
        content["error"] = str(exc.cause)
    return JSONResponse(status_code=exc.status_code, content=content)


# подключаем роутеры
app.include_router(form_fields.router)
app.include_router(system.router)
