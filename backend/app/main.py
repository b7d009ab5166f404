import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import get_settings
from .db.database import engine
from .db import models
from .routes.attachments_table import router as attachments_table_router

logging.basicConfig(level=get_settings().LOG_LEVEL)

models.Base.metadata.create_all(bind=engine)


app = FastAPI(title="Attachments Table Service")
logger = logging.getLogger(__name__)

origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(attachments_table_router)


@app.get("/")
async def read_root():
    return {"message": "Welcome to the Attachments Table Service"}
