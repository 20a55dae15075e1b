from typing import Any, Dict, List, Optional
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ResponseBuilder:
    """Builder class for the JSON bodies the student endpoints return"""

    @staticmethod
    def success(
        data: Any = None,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        """Return the payload itself as the response body"""
        return JSONResponse(status_code=status_code, content=jsonable_encoder(data))

    @staticmethod
    def message(
        message: str,
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        """Create an informational `{"message": ...}` response"""
        return JSONResponse(status_code=status_code, content={"message": message})

    @staticmethod
    def error(
        message: str = "An error occurred",
        errors: Optional[Dict[str, List[str]]] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> JSONResponse:
        """Create an error response; `errors` maps field names to their messages"""
        content: Dict[str, Any] = {"message": message}
        if errors:
            content["errors"] = errors
        return JSONResponse(status_code=status_code, content=content)
