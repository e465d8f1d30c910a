"""Application submission endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from application.use_cases import (
    GetApplicationStatusUseCase,
    SubmitApplicationUseCase,
    UploadDocumentUseCase,
)
from domain.entities import ApplicationDraft
from domain.enums import Industry
from domain.exceptions import PersistenceError, StorageError, ValidationError
from domain.services import validate_application
from domain.value_objects import Document
from infrastructure.config import get_logger, get_settings
from presentation.api.v1.dependencies import (
    get_application_status_use_case,
    get_submit_application_use_case,
    get_upload_document_use_case,
)
from presentation.schemas import (
    ApplicationStatusResponse,
    ErrorResponse,
    SubmissionResponse,
    to_wire_errors,
)

router = APIRouter(prefix="/applications", tags=["applications"])
logger = get_logger(__name__)

TRUTHY = {"true", "1", "on", "yes"}


def parse_consent(raw: Optional[str]) -> bool:
    """Interpret a checkbox value; anything unrecognised means no consent."""
    return raw is not None and raw.strip().lower() in TRUTHY


def error_response(status_code: int, message: str, errors: Optional[dict[str, str]] = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=to_wire_errors(errors or {}))
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def read_upload(upload: Optional[UploadFile], max_bytes: int) -> Optional[tuple[Document, bytes]]:
    """
    Read at most ``max_bytes + 1`` bytes of an upload.

    Returns None when no file was sent. The returned size is capped, which
    is still enough to tell that an oversized file is too large.
    """
    if upload is None or not upload.filename:
        return None
    content = await upload.read(max_bytes + 1)
    document = Document(
        filename=upload.filename,
        content_type=upload.content_type or "",
        size=max(len(content), upload.size or 0),
    )
    return document, content


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmissionResponse,
    responses={422: {"model": ErrorResponse}, 503: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_application(
    founder_name: Optional[str] = Form(None, alias="founderName"),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    venture_name: Optional[str] = Form(None, alias="ventureName"),
    industry: Optional[str] = Form(None),
    gdpr_consent: Optional[str] = Form(None, alias="gdprConsent"),
    pitch_deck: Optional[UploadFile] = File(None, alias="pitchDeck"),
    business_plan: Optional[UploadFile] = File(None, alias="businessPlan"),
    upload_use_case: UploadDocumentUseCase = Depends(get_upload_document_use_case),
    submit_use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
):
    """Accept a founder application with its pitch deck and optional business plan."""
    max_bytes = get_settings().max_upload_bytes
    try:
        pitch_deck_upload = await read_upload(pitch_deck, max_bytes)
        business_plan_upload = await read_upload(business_plan, max_bytes)

        draft = ApplicationDraft(
            founder_name=founder_name or "",
            email=(email or "").strip(),
            phone=(phone or "").strip(),
            venture_name=venture_name or "",
            industry=industry or Industry.TECHNOLOGY.value,
            pitch_deck=pitch_deck_upload[0] if pitch_deck_upload else None,
            business_plan=business_plan_upload[0] if business_plan_upload else None,
            gdpr_consent=parse_consent(gdpr_consent),
        )

        # Reject before anything is written to storage
        errors = validate_application(draft, max_bytes)
        if errors:
            raise ValidationError(errors)

        stored = {}
        for field_name, upload in (("pitch_deck", pitch_deck_upload), ("business_plan", business_plan_upload)):
            if upload is None:
                continue
            document, content = upload
            stored[field_name] = await upload_use_case.execute(
                content=content,
                content_type=document.content_type,
                filename=document.filename,
                field_name=field_name,
                declared_size=document.size,
            )

        result = await submit_use_case.execute(
            ApplicationDraft(
                founder_name=draft.founder_name,
                email=draft.email,
                phone=draft.phone,
                venture_name=draft.venture_name,
                industry=draft.industry,
                pitch_deck=stored.get("pitch_deck"),
                business_plan=stored.get("business_plan"),
                gdpr_consent=draft.gdpr_consent,
            )
        )

        body = SubmissionResponse(submission_id=result.application_id, tracking_token=result.tracking_token)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump(by_alias=True))

    except ValidationError as e:
        logger.info(f"Application rejected: {', '.join(sorted(e.errors))}")
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Please correct the highlighted fields.",
            e.errors,
        )
    except (StorageError, PersistenceError) as e:
        logger.error(f"Application submission failed: {str(e)}")
        return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, str(e))
    except Exception as e:
        logger.error(f"Application submission error: {str(e)}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Submission failed due to server error.",
        )
    finally:
        for upload in (pitch_deck, business_plan):
            if upload is not None:
                await upload.close()


@router.get(
    "/{tracking_token}/status",
    response_model=ApplicationStatusResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_application_status(
    tracking_token: str,
    use_case: GetApplicationStatusUseCase = Depends(get_application_status_use_case),
):
    """Look up the review status of an application by its tracking token."""
    result = await use_case.execute(tracking_token)
    if result is None:
        return error_response(status.HTTP_404_NOT_FOUND, "No application found for this tracking ID.")

    return ApplicationStatusResponse(
        tracking_token=result["tracking_token"],
        venture_name=result["venture_name"],
        status=result["status"].value,
        created_at=result["created_at"],
    )
