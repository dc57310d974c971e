import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rolling_avg.routers import uplink
from rolling_avg.settings import load_settings

settings = load_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="rolling-avg uplink decoder")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(uplink.router)


@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("rolling_avg.main:app", host="0.0.0.0", port=8000, reload=True)
