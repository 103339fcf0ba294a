from fastapi import FastAPI

from pantry.api.pantry import router as pantry_router

app = FastAPI(
    title="Pantry API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(pantry_router)
