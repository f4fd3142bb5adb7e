"""
FastAPI server for user registration.
"""

import logging
from typing import List, Optional, Dict, Union

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, StrictInt, StrictStr
import uvicorn

from .exceptions import StoreError
from .services import ConfigurationService, LedgerConfig, RegistrationService, create_store
from .validators import FIELD_VALIDATORS

logger = logging.getLogger(__name__)

# Age as a string or integer; JSON booleans and floats are rejected
AgeValue = Union[StrictStr, StrictInt]


# Pydantic models for API requests/responses
class RegisterRequest(BaseModel):
    """Request model for registering a user."""
    full_name: str = Field(..., description="Full name")
    age: AgeValue = Field(..., description="Age in years, as a string or an integer")
    phone: str = Field(..., description="Phone number in the form +79XXXXXXXXX")
    email: str = Field(..., description="Email address")


class UserResponse(BaseModel):
    """A stored user."""
    full_name: str
    phone: str
    email: str
    age: str


class ListResponse(BaseModel):
    """Response model for list operation."""
    items: List[UserResponse] = Field(..., description="Stored users")
    total: int = Field(..., description="Total number of users")


class ExistsResponse(BaseModel):
    """Response model for duplicate check."""
    exists: bool


class ValidateRequest(BaseModel):
    """Request model for validating any subset of fields."""
    full_name: Optional[str] = None
    age: Optional[AgeValue] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class FieldResult(BaseModel):
    """Validation result for one field."""
    accepted: bool
    reason: str = ""


class ValidateResponse(BaseModel):
    """Response model for validation."""
    valid: bool
    fields: Dict[str, FieldResult]


def _service(request: Request) -> RegistrationService:
    return request.app.state.registration_service


def create_app(config: Optional[LedgerConfig] = None) -> FastAPI:
    """Create the API application bound to the configured user store."""
    if config is None:
        config = ConfigurationService().get_config()

    app = FastAPI(
        title="userledger API",
        description="User registration validation and storage",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.registration_service = RegistrationService(create_store(config.store))

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint."""
        try:
            total = _service(request).store.count()
        except StoreError as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))
        return {"status": "healthy", "message": "userledger API is running", "total_users": total}

    @app.post("/users", response_model=UserResponse, status_code=201)
    def register_user(payload: RegisterRequest, request: Request):
        """Validate and store a new user."""
        try:
            result = _service(request).register(
                payload.full_name,
                str(payload.age),
                payload.phone,
                payload.email,
            )
        except StoreError as e:
            logger.error(f"Failed to register user: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        if result.errors:
            raise HTTPException(status_code=422, detail={"errors": result.errors})
        if result.duplicate:
            raise HTTPException(status_code=409, detail="User with the same full name, phone or email already exists")

        return UserResponse(**result.record.to_dict())

    @app.get("/users", response_model=ListResponse)
    def list_users(
        request: Request,
        limit: int = Query(100, ge=1, le=1000, description="Maximum number of users to return"),
        offset: int = Query(0, ge=0, description="Number of users to skip")
    ):
        """List stored users."""
        try:
            records = _service(request).list_users()
        except StoreError as e:
            logger.error(f"Failed to list users: {e}")
            raise HTTPException(status_code=500, detail=str(e))

        items = [UserResponse(**record.to_dict()) for record in records[offset:offset + limit]]
        return ListResponse(items=items, total=len(records))

    @app.get("/users/exists", response_model=ExistsResponse)
    def user_exists(
        request: Request,
        full_name: str = Query(..., description="Full name"),
        phone: str = Query(..., description="Phone number"),
        email: str = Query(..., description="Email address")
    ):
        """Check whether a user with the same full name, phone or email is stored."""
        try:
            return ExistsResponse(exists=_service(request).is_registered(full_name, phone, email))
        except StoreError as e:
            logger.error(f"Failed to check user: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    @app.post("/validate", response_model=ValidateResponse)
    def validate_fields(payload: ValidateRequest):
        """Validate the supplied fields without storing anything."""
        values = payload.model_dump(exclude_none=True)
        if not values:
            raise HTTPException(status_code=422, detail="At least one field is required")

        results = {}
        for name, value in values.items():
            accepted, reason = FIELD_VALIDATORS[name](str(value))
            results[name] = FieldResult(accepted=accepted, reason=reason)

        return ValidateResponse(
            valid=all(r.accepted for r in results.values()),
            fields=results
        )

    logger.info(f"API bound to user store {config.store.store_path}")
    return app


def run_server(host: str = "127.0.0.1", port: int = 8000, config: Optional[LedgerConfig] = None):
    """Run the FastAPI server."""
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_level="info"
    )


if __name__ == "__main__":
    run_server()
