from __future__ import annotations

from staffboard.services.flow_controller import FlowController, flow_controller


def get_flow_controller() -> FlowController:
    return flow_controller
