"""
Quote API - FastAPI surface for the quote engine.

Front ends collect footage and business inputs, post them here on every
change and render the returned quote and summary.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lighting_quote import __version__
from lighting_quote.engine import MinimumRule, PricingConfig, QuoteRequest
from lighting_quote.services.quote_summary import summarize_quote
from lighting_quote.services.rate_sheet import build_rate_sheet, footage_range
from lighting_quote.api.state import engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Lighting Quote API",
    description="Pricing and kit planner for permanent holiday lighting",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MinimumRuleModel(BaseModel):
    enabled: bool = True
    threshold_ft: Optional[int] = 75
    minimum: Optional[float] = 2000.0


class PricingConfigModel(BaseModel):
    """Business inputs. Omitted numbers count as zero, like the engine."""
    kit_costs: Dict[int, Optional[float]] = {}
    rate_under_100: Optional[float] = None
    rate_under_200: Optional[float] = None
    rate_200_plus: Optional[float] = None
    use_lift: bool = False
    lift_rental_per_day: Optional[float] = None
    lift_days: Optional[int] = None
    min_rule: Optional[MinimumRuleModel] = MinimumRuleModel()

    def to_config(self) -> PricingConfig:
        return PricingConfig(
            kit_costs=dict(self.kit_costs),
            rate_under_100=self.rate_under_100,
            rate_under_200=self.rate_under_200,
            rate_200_plus=self.rate_200_plus,
            use_lift=self.use_lift,
            lift_rental_per_day=self.lift_rental_per_day,
            lift_days=self.lift_days,
            min_rule=MinimumRule(**self.min_rule.model_dump()) if self.min_rule else None,
        )


class QuoteBody(BaseModel):
    # Any value; the engine normalizes footage
    footage: Any = 0
    config: Optional[PricingConfigModel] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Lighting Quote API Active"}


@app.get("/defaults")
async def get_defaults():
    settings = engine.settings
    config = settings.pricing_config()
    return {
        "footage": settings.default_footage,
        "config": {
            "kit_costs": {str(size): cost for size, cost in config.kit_costs.items()},
            "rate_under_100": config.rate_under_100,
            "rate_under_200": config.rate_under_200,
            "rate_200_plus": config.rate_200_plus,
            "use_lift": config.use_lift,
            "lift_rental_per_day": config.lift_rental_per_day,
            "lift_days": config.lift_days,
            "min_rule": {
                "enabled": config.min_rule.enabled,
                "threshold_ft": config.min_rule.threshold_ft,
                "minimum": config.min_rule.minimum,
            },
        },
    }


@app.post("/quote")
async def create_quote(body: QuoteBody):
    try:
        config = body.config.to_config() if body.config else engine.default_config
        quote = engine.calculate(QuoteRequest(footage=body.footage), config)
        return {
            "quote": quote.to_dict(),
            "summary": summarize_quote(quote, config),
        }
    except Exception as e:
        logger.exception("Quote failed for footage %r", body.footage)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/rate-sheet")
async def get_rate_sheet(
    start: int = Query(0, ge=0),
    stop: int = Query(400, ge=0),
    step: int = Query(25, ge=1),
):
    try:
        df = build_rate_sheet(footages=footage_range(start, stop, step), engine=engine)
        return df.to_dict(orient="records")
    except Exception as e:
        logger.exception("Rate sheet failed")
        raise HTTPException(status_code=500, detail=str(e))
