import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shop.backend.routers import auth as auth_router
from shop.backend.routers import customers as customers_router
from shop.backend.routers import session as session_router

app = FastAPI(title="Mari Zap Shop API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],        # adjust for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(customers_router.router)
app.include_router(session_router.router)


def run():
    uvicorn.run("shop.backend.main:app", host="127.0.0.1", port=8000)
