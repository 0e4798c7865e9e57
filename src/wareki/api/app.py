from fastapi import FastAPI
from wareki.api.public import router as public_router

app = FastAPI(title="wareki public api")
app.include_router(public_router)
