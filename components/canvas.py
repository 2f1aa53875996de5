"""Plotly rendering of the floor-plan canvas."""

import plotly.graph_objects as go
from typing import Dict, Optional, Tuple

from models.room import FloorLayout
from models.tenancy import RoomWithContract
from engine.layout import band_offset
from engine.status import status_badge
from engine.currency import format_currency_with_suffix
from config.defaults import (
    ALL_FLOORS, CANVAS_WIDTH, CANVAS_GRID_SIZE, FLOOR_HEADER_HEIGHT, SINGLE_FLOOR_HEIGHT,
)

Rect = Tuple[float, float, float, float]


def _card_text(item: Optional[RoomWithContract], number: str, status) -> str:
    badge = status_badge(status)
    lines = [f"<b>{number}</b>", badge.label]
    if item and item.resident:
        lines.append(item.resident.name)
    elif item:
        lines.append(format_currency_with_suffix(item.room.base_price))
    return "<br>".join(lines)


def floor_plan_figure(
    layout: FloorLayout,
    details: Optional[Dict[str, RoomWithContract]] = None,
    preview: Optional[Dict[str, Rect]] = None,
    selected_room_id: Optional[str] = None,
    edit_mode: bool = False,
) -> go.Figure:
    """Draw every room as a card at its display position.

    `preview` overrides the local rect of rooms with an in-flight gesture; the
    floor band offset is kept so the card stays in its floor.
    """
    details = details or {}
    preview = preview or {}
    fig = go.Figure()

    height = layout.total_height or SINGLE_FLOOR_HEIGHT  # Empty all-floors view

    # Floor bands and headers
    if layout.view_mode == ALL_FLOORS:
        for rank, floor in enumerate(layout.floors):
            top = band_offset(rank)
            fig.add_shape(
                type="rect", x0=0, x1=CANVAS_WIDTH, y0=top, y1=top + FLOOR_HEADER_HEIGHT,
                fillcolor="#E2E8F0", line_width=0, layer="below",
            )
            fig.add_annotation(
                x=20, y=top + FLOOR_HEADER_HEIGHT / 2, text=f"<b>Floor {floor}</b>",
                showarrow=False, xanchor="left", font_size=18,
            )
            fig.add_shape(
                type="rect", x0=0, x1=CANVAS_WIDTH,
                y0=top + FLOOR_HEADER_HEIGHT, y1=top + FLOOR_HEADER_HEIGHT + SINGLE_FLOOR_HEIGHT,
                line=dict(color="#CBD5E1", width=1), layer="below",
            )

    xs, ys, ids, texts = [], [], [], []
    for dr in layout.display_rooms:
        room = dr.room
        x, y, w, h = preview.get(room.room_id, (room.x, room.y, room.width, room.height))
        top = dr.display_y + (y - room.y)
        badge = status_badge(room.status)
        is_selected = room.room_id == selected_room_id

        fig.add_shape(
            type="rect", x0=x, x1=x + w, y0=top, y1=top + h,
            fillcolor=badge.fill,
            line=dict(
                color="#2563EB" if (edit_mode or is_selected) else badge.color,
                width=3 if is_selected else 2,
                dash="dot" if room.room_id in preview else "solid",
            ),
            opacity=0.8 if room.room_id in preview else 1.0,
        )
        xs.append(x + w / 2)
        ys.append(top + h / 2)
        ids.append(room.room_id)
        texts.append(_card_text(details.get(room.room_id), room.number, room.status))

    # Room centres carry the ids so a click selects the room
    fig.add_trace(go.Scatter(
        x=xs, y=ys, mode="text+markers", text=texts,
        marker=dict(size=24, opacity=0),
        customdata=ids,
        hovertemplate="%{text}<extra></extra>",
        showlegend=False,
    ))

    fig.update_xaxes(
        range=[0, CANVAS_WIDTH], showgrid=True, gridcolor="#F1F5F9",
        dtick=CANVAS_GRID_SIZE * 10, zeroline=False, showticklabels=False,
    )
    fig.update_yaxes(
        range=[height, 0], showgrid=True, gridcolor="#F1F5F9",
        dtick=CANVAS_GRID_SIZE * 10, zeroline=False, showticklabels=False,
        scaleanchor="x", scaleratio=1,
    )
    fig.update_layout(
        height=max(400, int(height * 0.6)),
        margin=dict(l=10, r=10, t=10, b=10),
        plot_bgcolor="#F8FAFC",
        dragmode=False,
        clickmode="event+select",
    )
    return fig
