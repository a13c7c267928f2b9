"""
Dream World API — FastAPI endpoints.

A thin host around the transform:
- Dream transformation
- Word classification
- Configuration inspection
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from dream_world.models.config import TransformConfig
from dream_world.pipeline.transform import DreamTransformer


# --- Request/Response Models ---

class DreamRequest(BaseModel):
    dream: str


class ClassifyResponse(BaseModel):
    word: str
    type: str


# --- Application Factory ---

def create_app(config: Optional[TransformConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Dream World API",
        description="Turns dream descriptions into entity/relationship graphs",
        version="0.1.0",
    )

    transformer = DreamTransformer(config)

    app.state.config = transformer.config
    app.state.transformer = transformer

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/world")
    def transform(req: DreamRequest):
        """Build the World Model for a dream."""
        text = req.dream.strip()
        if not text:
            raise HTTPException(400, "Enter a dream to see output.")
        return transformer.transform(text).to_dict()

    @app.get("/classify/{word}")
    def classify_word(word: str):
        """Entity type a single word would receive."""
        word = word.lower()
        return ClassifyResponse(
            word=word,
            type=transformer.classifier.classify(word).value,
        )

    @app.get("/config")
    def get_config():
        """Active transform configuration."""
        return transformer.config.to_dict()

    return app


# Default application instance
app = create_app()
