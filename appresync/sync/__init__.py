# appresync Sync Module
# Resync controller, URL override and modal presentation

from appresync.sync.controller import SUCCESS_MESSAGE, ControllerState, ResyncController
from appresync.sync.modal import ResyncModal
from appresync.sync.models import (
    FUNCTION_LISTING_TAG,
    UNKNOWN_ERROR_CODE,
    AppMethod,
    AppRef,
    ApplicationError,
    CodedError,
    Environment,
    OutcomeKind,
    ResyncOutcome,
    ResyncRequest,
    ResyncResponse,
    Success,
    TransportFailure,
)
from appresync.sync.override import UrlOverride
from appresync.sync.view import ModalView, build_view

__all__ = [
    # Models
    "AppMethod",
    "AppRef",
    "CodedError",
    "Environment",
    "ResyncRequest",
    "ResyncResponse",
    "OutcomeKind",
    "ResyncOutcome",
    "Success",
    "ApplicationError",
    "TransportFailure",
    "UNKNOWN_ERROR_CODE",
    "FUNCTION_LISTING_TAG",
    # Override
    "UrlOverride",
    # Controller
    "ResyncController",
    "ControllerState",
    "SUCCESS_MESSAGE",
    # Presentation
    "ModalView",
    "build_view",
    "ResyncModal",
]
