from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
import uvicorn
import logging
from configurations.config import settings
from routes.users import user_routes
from routes.restaurants import restaurant_routes
from routes.meals import meal_routes
from routes.carts import cart_routes
from routes.ordersystem import order_routes

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Fastfood API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_routes.userRouter, prefix="/users", tags=["USERS"])
app.include_router(restaurant_routes.router, prefix="/restaurants", tags=["RESTAURANTS"])
app.include_router(meal_routes.router, prefix="/meals", tags=["MEALS"])
app.include_router(cart_routes.router, prefix="/carts", tags=["CARTS"])
app.include_router(order_routes.router, prefix="/orders", tags=["ORDER_SYSTEM"])


# request validation failures are answered with 400
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())}
    )


@app.get("/")
def read_root():
    return {"message": "Server running"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
