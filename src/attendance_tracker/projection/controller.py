from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import error_response, json_body
from ..container import Container
from ..core.constants import DEFAULT_TARGET_PERCENT
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    projector = container.target_projector

    @app.route("/api/project", methods=["POST"], endpoint="project")
    def project():
        try:
            data = json_body(request)
            result = projector.project(
                data.get("classesHeld"),
                data.get("classesAttended"),
                data.get("targetPercent", DEFAULT_TARGET_PERCENT),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(result.to_dict())
