# appresync Modal View
# Presentation state derived from a resync controller

from dataclasses import dataclass
from typing import Optional

from appresync.sync.controller import ResyncController
from appresync.sync.models import CodedError

URL_PLACEHOLDER = "https://example.com/api/inngest"
VERCEL_PLATFORM = "vercel"
VERCEL_URLS_DOCS = "https://vercel.com/docs/deployments/generated-urls"
APP_ID_DOCS = "https://www.inngest.com/docs/apps#apps-in-sdk"

RESYNC_TITLE = "Resync app"
MIGRATE_TITLE = "Migrate to serve"
RESYNC_LABEL = "Resync app"
MIGRATE_LABEL = "Migrate app"

RESYNC_DESCRIPTION = (
    "This initiates the sync request to your app which pushes the updated function configuration to Inngest."
)
MIGRATE_DESCRIPTION = (
    "Apps using connect automatically sync every time they connect to Inngest - a manual resync is not "
    'necessary. Migrate the app to use HTTP via "serve" by setting your URL.'
)
PLATFORM_BANNER = (
    "Vercel generates a unique URL for each deployment (see docs). Please confirm that you are using the "
    "correct URL if you choose a deployment's generated URL instead of a static domain for your app."
)
OVERRIDE_WARNING = (
    "Please ensure that your app ID is not changed before resyncing. Changing the app ID will result in "
    "the creation of a new app in this environment."
)


@dataclass(frozen=True)
class ModalView:
    """Everything needed to render the resync modal."""

    title: str
    description: str
    confirm_label: str
    confirm_disabled: bool
    cancel_disabled: bool
    input_value: str
    input_read_only: bool
    input_placeholder: str
    switch_checked: bool
    switch_disabled: bool
    show_platform_banner: bool
    show_override_warning: bool
    failure: Optional[CodedError]


def build_view(controller: ResyncController) -> ModalView:
    """
    Build the modal view for the current controller state.

    Args:
        controller: The resync controller.

    Returns:
        ModalView snapshot.
    """
    is_syncing = controller.is_syncing
    failure = controller.last_failure
    migration = controller.is_migration

    return ModalView(
        title=MIGRATE_TITLE if migration else RESYNC_TITLE,
        description=MIGRATE_DESCRIPTION if migration else RESYNC_DESCRIPTION,
        confirm_label=MIGRATE_LABEL if migration else RESYNC_LABEL,
        confirm_disabled=is_syncing or (migration and not controller.is_overridden),
        cancel_disabled=is_syncing,
        input_value=controller.effective_url,
        input_read_only=controller.override.read_only,
        input_placeholder=URL_PLACEHOLDER,
        switch_checked=controller.is_overridden,
        switch_disabled=is_syncing,
        show_platform_banner=controller.platform == VERCEL_PLATFORM and failure is None,
        show_override_warning=controller.is_overridden and failure is None,
        failure=failure if not is_syncing else None,
    )
