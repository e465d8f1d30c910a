"""Contact, event registration and network signup endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from application.use_cases import RecordInquiryUseCase, UploadDocumentUseCase
from domain.entities import ContactMessage, EventRegistration, NetworkSignup
from domain.enums import NetworkRole
from domain.exceptions import PersistenceError, StorageError, ValidationError
from infrastructure.config import get_logger, get_settings
from presentation.api.v1.dependencies import get_record_inquiry_use_case, get_upload_document_use_case
from presentation.api.v1.endpoints.applications import error_response
from presentation.schemas import ContactMessageRequest, ErrorResponse, EventRegistrationRequest, RecordCreatedResponse

router = APIRouter(tags=["inquiries"])
logger = get_logger(__name__)

ERROR_RESPONSES = {422: {"model": ErrorResponse}, 503: {"model": ErrorResponse}}


async def _record(use_case: RecordInquiryUseCase, build) -> JSONResponse:
    """Build an inquiry entity, persist it and map failures to responses."""
    try:
        saved = await use_case.execute(build())
    except ValidationError as e:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Please correct the highlighted fields.", e.errors)
    except PersistenceError as e:
        logger.error(f"Inquiry could not be saved: {str(e)}")
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))

    body = RecordCreatedResponse(id=saved.id)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump(by_alias=True))


@router.post("/contact", status_code=status.HTTP_201_CREATED, response_model=RecordCreatedResponse, responses=ERROR_RESPONSES)
async def submit_contact_message(
    request: ContactMessageRequest,
    use_case: RecordInquiryUseCase = Depends(get_record_inquiry_use_case),
):
    """Store a message from the contact form."""
    return await _record(
        use_case,
        lambda: ContactMessage(
            name=request.name,
            email=request.email.strip(),
            phone=(request.phone or "").strip() or None,
            message=request.message,
        ),
    )


@router.post(
    "/events/registrations",
    status_code=status.HTTP_201_CREATED,
    response_model=RecordCreatedResponse,
    responses=ERROR_RESPONSES,
)
async def register_for_event(
    request: EventRegistrationRequest,
    use_case: RecordInquiryUseCase = Depends(get_record_inquiry_use_case),
):
    """Register an attendee for an event."""
    return await _record(
        use_case,
        lambda: EventRegistration(
            event_name=request.event_name,
            email=request.email.strip(),
            organization=request.organization,
        ),
    )


@router.post(
    "/network/signups",
    status_code=status.HTTP_201_CREATED,
    response_model=RecordCreatedResponse,
    responses=ERROR_RESPONSES,
)
async def join_network(
    name: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    expertise_areas: Optional[str] = Form(None, alias="expertiseAreas"),
    cv: Optional[UploadFile] = File(None),
    upload_use_case: UploadDocumentUseCase = Depends(get_upload_document_use_case),
    use_case: RecordInquiryUseCase = Depends(get_record_inquiry_use_case),
):
    """Sign up as a mentor or investor, optionally with a CV."""
    try:
        network_role = NetworkRole(role)
    except ValueError:
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Please correct the highlighted fields.",
            {"role": "Role must be Mentor or Investor."},
        )

    # Reject before anything is written to storage
    try:
        signup = NetworkSignup(
            name=name or "",
            role=network_role,
            expertise_areas=(expertise_areas or "").split(","),
        )
    except ValidationError as e:
        if cv is not None:
            await cv.close()
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Please correct the highlighted fields.", e.errors)

    if cv is not None and cv.filename:
        max_bytes = get_settings().max_upload_bytes
        try:
            content = await cv.read(max_bytes + 1)
            stored = await upload_use_case.execute(
                content=content,
                content_type=cv.content_type or "",
                filename=cv.filename,
                field_name="cv",
                declared_size=cv.size,
            )
        except ValidationError as e:
            return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Please correct the highlighted fields.", e.errors)
        except StorageError as e:
            return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
        finally:
            await cv.close()
        signup.cv_key = stored.storage_key

    return await _record(use_case, lambda: signup)
