import dash
import dash_bootstrap_components as dbc

from mpox_dashboard.callbacks import register_callbacks
from mpox_dashboard.config import config
from mpox_dashboard.layout import serve_layout
from mpox_dashboard.logging_setup import get_logger

logger = get_logger('mpox_dashboard.app')

# Initialize Dash app with Bootstrap theme
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP],
    meta_tags=[
        {"name": "viewport", "content": "width=device-width, initial-scale=1"}
    ]
)
app.title = 'MPOX Brasil'
server = app.server

# Dark page background behind the container
app.index_string = '''
<!DOCTYPE html>
<html>
    <head>
        {%metas%}
        <title>MPOX Brasil</title>
        {%favicon%}
        {%css%}
        <style>
            body {
                background-color: #0b1220;
                margin: 0;
                padding: 0;
            }
            .table-dark {
                --bs-table-bg: #1c2536;
            }
        </style>
    </head>
    <body>
        {%app_entry%}
        <footer>
            {%config%}
            {%scripts%}
            {%renderer%}
        </footer>
    </body>
</html>
'''

# A function layout is re-evaluated on every page load, one fetch per load
app.layout = serve_layout

register_callbacks(app)

if __name__ == '__main__':
    logger.info("Starting dashboard server on %s:%s", config.DASH_HOST, config.DASH_PORT)
    app.run(host=config.DASH_HOST, port=config.DASH_PORT, debug=config.DASH_DEBUG)
