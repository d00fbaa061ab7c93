'''
FastAPI application for a hotel Front Desk.

The app exposes the front desk operations over HTTP.

Available endpoints:
- /customers: Add, list, read, delete customers.
- /rooms: List rooms, book and check out.
- /billing: Stay quotes, occupancy report and the itemized session invoice.

All state lives in two line-oriented files under FRONTDESK_DATA_DIR.
'''

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from Database.db import FrontDeskDB

# routers
from api.customer_routes import customer_router
from api.room_routes import room_router
from api.billing_routes import billing_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    app.state.db = FrontDeskDB()   # create ONCE
    yield

# Initialize FastAPI app
app = FastAPI(title="Front Desk API", version="1.0.0", lifespan=lifespan)

app.include_router(customer_router, prefix="/customers", tags=["Customers"])
app.include_router(room_router, prefix="/rooms", tags=["Rooms"])
app.include_router(billing_router, prefix="/billing", tags=["Billing"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Front Desk API"}

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    uvicorn.run("main:app", host="localhost", port=8000, reload=True)
