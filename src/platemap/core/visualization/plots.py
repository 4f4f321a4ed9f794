"""
Module for drawing platemaps.
"""
import logging

import plotly.graph_objects as go

from ..analysis.classifier import CATEGORIES, DEFAULT_THRESHOLD, classify, scale_values
from ..data.geometry import shape_for
from ..data.models import build_platemap, last_per_well, platemap_table
from ..data.wells import row_letters
from .palette import DEFAULT_PALETTE, assign_colors


def hit_map(data, well, plate=96, threshold=DEFAULT_THRESHOLD, palette=DEFAULT_PALETTE,
            show_values=False, scale=False, title=None, **layout):
    """
    Draw a platemap with wells coloured by hit category.

    Args:
        data (sequence): Numeric value for each well.
        well (sequence): Well labels, e.g. 'A01', parallel to data.
        plate (int, optional): Wells on the plate: 6, 12, 24, 48, 96, 384
            or 1536. Default 96.
        threshold (float, optional): Values above it are hits and values
            below its negative are negative hits. Default 2.
        palette (str, optional): Palette for hit / null / neg_hit.
            Default 'Spectral'.
        show_values (bool, optional): Write each well's value on its marker.
            Default False.
        scale (bool, optional): Z-score the data before classifying, so the
            threshold is in standard deviations. Default False.
        title (str, optional): Figure title. Default None.
        **layout: Extra keyword arguments for fig.update_layout.

    Returns:
        plotly.graph_objects.Figure: The platemap.
    """
    # Fail before any work on an unknown plate
    shape = shape_for(plate)
    records = build_platemap(data, well, shape)

    if scale:
        scores = scale_values([r.value for r in records])
        scored = [r._replace(value=s) for r, s in zip(records, scores)]
        classified = [
            c._replace(value=r.value)
            for c, r in zip(classify(scored, threshold), records)
        ]
    else:
        classified = classify(records, threshold)

    table = platemap_table(classified)
    colors = assign_colors(palette)
    return create_platemap_figure(table, shape, colors, show_values=show_values,
                                  title=title, **layout)


def create_platemap_figure(table, plate, colors, show_values=False, title=None, **layout):
    """
    Create the platemap figure from a classified table.

    Args:
        table (pandas.DataFrame): Columns 'well', 'row', 'column', 'value'
            and 'category'.
        plate (int or PlateShape): Plate format, sets the grid shape.
        colors (dict): Colour for each category.
        show_values (bool, optional): Overlay each well's value. Default False.
        title (str, optional): Figure title. Default None.
        **layout: Extra keyword arguments for fig.update_layout.

    Returns:
        plotly.graph_objects.Figure: One scatter trace per category present.
    """
    shape = shape_for(plate)
    table = last_per_well(table)
    fig = go.Figure()

    # Empty wells first so filled ones draw on top
    fig.add_trace(go.Scatter(
        x=[c + 1 for r in range(shape.n_rows) for c in range(shape.n_cols)],
        y=[r for r in range(shape.n_rows) for c in range(shape.n_cols)],
        mode='markers',
        name='empty',
        hoverinfo='skip',
        showlegend=False,
        marker=dict(
            size=shape.marker_size,
            color='white',
            line=dict(color='lightgray', width=1)
        )
    ))

    for category in CATEGORIES:
        sub = table[table['category'] == category]
        if sub.empty:
            continue
        text = [f"{v:.2f}" for v in sub['value']] if show_values else None
        fig.add_trace(go.Scatter(
            x=sub['column'] + 1,
            y=sub['row'],
            mode='markers+text' if show_values else 'markers',
            name=category,
            text=text,
            textposition='middle center',
            textfont=dict(size=max(shape.marker_size // 3, 5)),
            customdata=sub[['well', 'value']].values,
            hovertemplate="%{customdata[0]}: %{customdata[1]}<extra>" + category + "</extra>",
            marker=dict(
                size=shape.marker_size,
                color=colors[category],
                line=dict(color='black', width=1)
            )
        ))

    fig.update_layout(
        title=title,
        width=shape.width,
        height=shape.height,
        plot_bgcolor='white',
        legend_title_text='hit',
        xaxis=dict(
            tickmode='array',
            tickvals=list(range(1, shape.n_cols + 1)),
            range=[0.5, shape.n_cols + 0.5],
            showgrid=False,
            zeroline=False,
            side='top'
        ),
        yaxis=dict(
            tickmode='array',
            tickvals=list(range(shape.n_rows)),
            ticktext=[row_letters(r) for r in range(shape.n_rows)],
            range=[shape.n_rows - 0.5, -0.5],  # row A at the top
            showgrid=False,
            zeroline=False,
            scaleanchor='x'
        ),
        margin=dict(l=50, r=50, t=80, b=50)
    )
    if layout:
        fig.update_layout(**layout)

    logging.getLogger('platemap').debug(
        f"Created {shape.well_count}-well platemap with {len(fig.data) - 1} category traces"
    )
    return fig
