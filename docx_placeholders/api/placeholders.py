"""Placeholder debugging API routes.

Upload a template to validate its placeholders, or upload an original and a
processed document to confirm the placeholders were replaced.
"""

import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile, status

from docx_placeholders.api.schemas import DebugResponse, DiffResponse
from docx_placeholders.core.config import Settings, get_settings
from docx_placeholders.strategies.debugger import PlaceholderConfiguration, PlaceholderDebugger
from docx_placeholders.strategies.diff import DocumentDiffValidator
from docx_placeholders.strategies.documents import DocxDocumentLoader
from docx_placeholders.strategies.substitution.patterns import SyntaxFamily

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/placeholders", tags=["placeholders"])


# =============================================================================
# Helper Functions
# =============================================================================


def _split_names(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


async def _store_upload(file: UploadFile, settings: Settings) -> Path:
    """Write an upload to the upload directory after checking its type."""
    if not file.filename or not file.filename.endswith(".docx"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only .docx files are supported",
        )
    target = Path(settings.upload_dir) / f"{uuid.uuid4().hex}_{Path(file.filename).name}"
    target.write_bytes(await file.read())
    logger.debug(f"Stored upload: {target}")
    return target


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/debug", response_model=DebugResponse, status_code=status.HTTP_200_OK)
async def debug_placeholders(
    file: UploadFile,
    placeholders: str = Form(..., description="Comma separated placeholder names"),
    syntax: SyntaxFamily | None = Form(default=None),
    settings: Settings = Depends(get_settings),
) -> DebugResponse:
    """Validate every named placeholder of an uploaded template.

    Raises:
        HTTPException: 415 for non-docx uploads, 422 for an empty name list.
    """
    names = _split_names(placeholders)
    if not names:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="At least one placeholder name is required",
        )

    path = await _store_upload(file, settings)
    try:
        config = PlaceholderConfiguration(syntax or settings.default_syntax, names)
        debugger = PlaceholderDebugger(
            loader=DocxDocumentLoader(),
            sentinel_prefix=settings.sentinel_prefix,
            test_value_prefix=settings.test_value_prefix,
        )
        debugger.configure_path(str(path), config)
        debugger.document_name = file.filename
        session = debugger.run()
        return DebugResponse(session=session, passed=session.passed, report=debugger.render_report())
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Placeholder debugging failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Placeholder debugging failed: {str(e)}",
        ) from e
    finally:
        path.unlink(missing_ok=True)


@router.post("/diff", response_model=DiffResponse, status_code=status.HTTP_200_OK)
async def diff_documents(
    original: UploadFile,
    processed: UploadFile,
    expected: str | None = Form(default=None, description="Comma separated expected tokens"),
    settings: Settings = Depends(get_settings),
) -> DiffResponse:
    """Compare an original template with a processed document."""
    original_path = await _store_upload(original, settings)
    try:
        processed_path = await _store_upload(processed, settings)
    except HTTPException:
        original_path.unlink(missing_ok=True)
        raise

    try:
        validator = DocumentDiffValidator.from_paths(
            str(original_path),
            str(processed_path),
            context_chars=settings.context_preview_chars,
        )
        report = validator.validate_replacements()
        expected_tokens = _split_names(expected)
        expected_results = (
            validator.validate_expected_placeholders(expected_tokens) if expected_tokens else []
        )
        return DiffResponse(
            report=report,
            expected=expected_results,
            passed=validator.passed,
            report_text=validator.render_report(),
        )
    except Exception as e:
        logger.error(f"Replacement validation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Replacement validation failed: {str(e)}",
        ) from e
    finally:
        original_path.unlink(missing_ok=True)
        processed_path.unlink(missing_ok=True)
