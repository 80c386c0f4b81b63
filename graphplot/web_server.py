"""graphplot Web Server - REST API for chart data computation.

Minimal web server that exposes:
- Discovery endpoints (graph types, themes, presets)
- chart endpoint (controls in, chart dataset or error message out)
- validate endpoint (field-level advice for a controls form)

Rendering is left to the client: the chart endpoint returns chart.js-ready
data, never an image.
"""

from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from graphplot.adapters import list_adapters_with_descriptions, resolve_family
from graphplot.controls import GraphControls, GraphKind, is_equation_kind
from graphplot.exceptions import ThemeNotFoundError
from graphplot.logger import Logger, session_logger
from graphplot.pipeline import get_pipeline
from graphplot.presets import get_presets
from graphplot.themes import list_themes_with_descriptions
from graphplot.validation import GraphControlsValidator

SERVICE_NAME = "graphplot"


class GraphPlotWebServer:
    """FastAPI web server for chart data computation."""

    def __init__(self, default_theme: Optional[str] = None, logger: Optional[Logger] = None):
        """
        Initialize the graphplot web server.

        Args:
            default_theme: Theme used when a request does not name one
                (default: GRAPHPLOT_THEME)
            logger: Logger instance

        Endpoints exposed:
            GET /ping - Health check
            GET /graph-types - List graph kinds with their shape family
            GET /themes - List palette themes
            GET /presets - Default controls, common equations, sample data
            POST /chart - Compute chart data for controls
            POST /validate - Field-level validation of controls
        """
        self.app = FastAPI(title="graphplot", description="Expression to chart data REST API")
        self.logger: Logger = logger or session_logger
        self.default_theme = default_theme
        self.validator = GraphControlsValidator()

        # Fail at startup rather than on the first request
        get_pipeline(self.default_theme)

        self.logger.info(
            "graphplot web server initialized",
            default_theme=default_theme or "(config)",
            endpoints=["discovery", "chart", "validate"],
        )
        self._setup_routes()

    def _setup_routes(self):
        """Register all HTTP routes."""

        # ====================================================================
        # DISCOVERY ENDPOINTS
        # ====================================================================

        @self.app.get("/ping")
        async def ping():
            """
            Health check endpoint.

            Returns:
                {status: "ok", timestamp: ISO8601, service: "graphplot"}
            """
            current_time = datetime.now().isoformat()
            self.logger.info("GET /ping", timestamp=current_time)
            return JSONResponse(
                content={"status": "ok", "timestamp": current_time, "service": SERVICE_NAME}
            )

        @self.app.get("/graph-types")
        async def list_graph_types():
            """List graph kinds, their shape family and input mode."""
            self.logger.info("GET /graph-types")
            descriptions = list_adapters_with_descriptions()
            data = []
            for kind in GraphKind:
                family = resolve_family(kind, self.logger)
                data.append(
                    {
                        "type": kind.value,
                        "family": family.value,
                        "equation_based": is_equation_kind(kind),
                        "description": descriptions[family.value],
                    }
                )
            return JSONResponse(content={"status": "success", "data": data})

        @self.app.get("/themes")
        async def list_themes():
            """List palette themes."""
            self.logger.info("GET /themes")
            data = [
                {"name": name, "description": description}
                for name, description in list_themes_with_descriptions().items()
            ]
            return JSONResponse(content={"status": "success", "data": data})

        @self.app.get("/presets")
        async def presets():
            """Default controls, common equations and sample data lists."""
            self.logger.info("GET /presets")
            return JSONResponse(content={"status": "success", "data": get_presets()})

        # ====================================================================
        # COMPUTATION ENDPOINTS
        # ====================================================================

        @self.app.post("/chart")
        async def compute_chart(controls: GraphControls, theme: Optional[str] = None):
            """Compute chart data for ``controls``.

            User input problems (bad equation, empty data) are not HTTP
            errors: the response has status "error" and the message to show
            in place of the chart.
            """
            theme_name = theme or self.default_theme
            self.logger.info("POST /chart", kind=controls.type.value, theme=theme_name or "(config)")
            try:
                pipeline = get_pipeline(theme_name)
            except ThemeNotFoundError as e:
                self.logger.warning("/chart unknown theme", theme=theme_name, status=404)
                raise HTTPException(status_code=404, detail=e.to_dict())

            result = pipeline.compute(controls)
            payload = result.model_dump(mode="json", by_alias=True)
            payload["status"] = "success" if result.is_ok else "error"
            self.logger.info(
                "/chart completed",
                kind=controls.type.value,
                outcome=payload["status"],
                status=200,
            )
            return JSONResponse(content=payload)

        @self.app.post("/validate")
        async def validate_controls(controls: GraphControls):
            """Field-level validation of ``controls`` with suggestions."""
            self.logger.info("POST /validate", kind=controls.type.value)
            result = self.validator.validate(controls)
            return JSONResponse(content=result.model_dump(mode="json"))
