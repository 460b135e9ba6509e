import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from credcheck.config import Config
from credcheck.routers.check import router as check_router
from credcheck.routers.metadata import router as metadata_router

logging.basicConfig(level=Config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Article Credibility Checker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error leaves as {"error": "<message>"}
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def body_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object with an 'article' string"})


@app.get("/")
def root():
    return {"status": "ok", "message": "Backend running"}

app.include_router(check_router, prefix="/api")
app.include_router(metadata_router, prefix="/api")
