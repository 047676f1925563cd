"""Convert engine output into API payloads."""

from __future__ import annotations

from collections.abc import Sequence

from trophicnet.engine.errors import NetworkDefect, format_report
from trophicnet.engine.levels import NetworkScene
from trophicnet.models.responses import (
    FlowBandOut,
    FlowOut,
    IssueOut,
    LevelOut,
    RectangleOut,
    SceneResponse,
    SpeciesOut,
    ValidationResponse,
)


def defects_to_issues(defects: Sequence[NetworkDefect]) -> list[IssueOut]:
    return [
        IssueOut(kind=d.kind.value, message=d.message, level=d.level, row=d.row)
        for d in defects
    ]


def defects_to_validation(defects: Sequence[NetworkDefect]) -> ValidationResponse:
    return ValidationResponse(
        valid=not defects,
        issues=defects_to_issues(defects),
        report=format_report(defects),
    )


def scene_to_response(scene: NetworkScene, processing_time_ms: float = 0.0) -> SceneResponse:
    levels = [
        LevelOut(
            index=level.index,
            y=level.y,
            species=[
                SpeciesOut(
                    rect=RectangleOut(
                        x=box.rect.left,
                        y=box.rect.top,
                        width=box.rect.width,
                        height=box.rect.height,
                    ),
                    fill=box.fill,
                    text_color=box.text_color,
                    label=box.label,
                )
                for box in level.species
            ],
        )
        for level in scene.levels
    ]

    bands = [
        FlowBandOut(
            prey_level=band.prey_level,
            predator_level=band.predator_level,
            flows=[
                FlowOut(
                    prey_index=p.prey_index,
                    predator_index=p.predator_index,
                    points=list(p.vertices),
                    width=p.width,
                    fill=p.fill,
                )
                for p in band.polygons
            ],
        )
        for band in scene.flows
    ]

    return SceneResponse(
        width=scene.width,
        height=scene.height,
        font=scene.font,
        levels=levels,
        flow_bands=bands,
        processing_time_ms=processing_time_ms,
    )
