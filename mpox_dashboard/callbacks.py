from dash.dependencies import Input, Output

from mpox_dashboard.layout import render
from mpox_dashboard.logging_setup import get_logger
from mpox_dashboard.models import DisplayState
from mpox_dashboard.view import DashboardView

logger = get_logger(__name__)


def load_display_state(mount_token):
    """Fetch once for a page load and hand the resulting state to the store."""
    logger.debug("Loading dashboard for mount %s", mount_token)
    view = DashboardView()
    view.initialize()
    return view.wait().to_dict()


def render_display_state(data):
    return render(DisplayState.from_dict(data))


def register_callbacks(app):
    app.callback(
        Output('display-state', 'data'),
        [Input('mount-token', 'data')]
    )(load_display_state)

    app.callback(
        Output('dashboard-body', 'children'),
        [Input('display-state', 'data')]
    )(render_display_state)
