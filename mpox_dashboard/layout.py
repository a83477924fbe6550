import uuid

from dash import html, dcc
import dash_bootstrap_components as dbc
import plotly.express as px

from mpox_dashboard.models import DisplayState, to_frame

TITLE = '📊 MPOX Brasil (v2)'

STYLES = {
    'page': {
        'padding': 20,
        'fontFamily': 'Arial',
        'background': '#0b1220',
        'color': 'white',
        'minHeight': '100vh',
    },
    'cards': {
        'display': 'flex',
        'gap': 20,
        'marginTop': 20,
    },
    'card': {
        'background': '#1c2536',
        'padding': 15,
        'borderRadius': 10,
        'color': 'white',
        'border': 'none',
    },
    'table': {
        'marginTop': 20,
        'width': '100%',
    },
    'warning': {
        'color': 'orange',
    },
}


def summary_card(label, value, value_id):
    return dbc.Card([
        dbc.CardBody([
            html.H3(label),
            html.P(value, id=value_id, className='mb-0'),
        ])
    ], style=STYLES['card'])


def cases_table(rows):
    """Two-column table, one body row per region in dataset order."""
    header = html.Thead(html.Tr([html.Th('Estado'), html.Th('Casos')]))
    body = html.Tbody([
        html.Tr([html.Td(row.region), html.Td(row.case_count)])
        for row in rows
    ])
    return dbc.Table(
        [header, body],
        id='cases-table',
        color='dark',
        bordered=False,
        hover=True,
        style=STYLES['table'],
    )


def cases_chart(rows):
    df = to_frame(rows)
    fig = px.bar(
        df,
        x='Estado',
        y='Casos',
        text='Casos',
        title='Casos por estado',
        labels={'Estado': 'Estado', 'Casos': 'Casos'},
    )
    fig.update_layout(
        paper_bgcolor='#1c2536',
        plot_bgcolor='#1c2536',
        font=dict(color='white', family='Arial'),
        margin=dict(l=20, r=20, t=50, b=20),
        height=320,
    )
    return dcc.Graph(
        id='cases-chart',
        figure=fig,
        config={'displayModeBar': False},
        style={'marginTop': 20},
    )


def render(state: DisplayState):
    """Build the dashboard body for a display state. No side effects."""
    children = [html.H1(TITLE)]

    if state.error_message:
        children.append(html.P(state.error_message, id='warning-message', style=STYLES['warning']))

    children.append(html.Div([
        summary_card('Total', state.total, 'total-value'),
        summary_card('Status', state.status, 'status-value'),
    ], style=STYLES['cards']))

    children.append(cases_table(state.rows))

    if state.rows:
        children.append(cases_chart(state.rows))

    return html.Div(children, id='dashboard-content')


def serve_layout():
    """Page shell for one page load; the fresh mount token triggers one fetch."""
    return dbc.Container([
        dcc.Store(id='mount-token', data=uuid.uuid4().hex),
        dcc.Store(id='display-state'),
        dcc.Loading(
            html.Div(render(DisplayState()), id='dashboard-body'),
            type='circle',
        ),
    ], fluid=True, style=STYLES['page'])
