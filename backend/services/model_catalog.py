"""Static catalog of the models behind the API.

Pure configuration data: the entries are declared, not measured at runtime.
"""

from models.schemas import ModelInfo

MODEL_CATALOG: tuple[ModelInfo, ...] = (
    ModelInfo(
        name="Tesseract OCR",
        version="5.0.0",
        type="OCR",
        metrics={"WER": 0.15, "Accuracy": 0.85},
    ),
    ModelInfo(
        name="Resume Matching Model",
        version="1.0.0",
        type="Matching",
        metrics={"F1-Score": 0.82, "Precision": 0.79, "Recall": 0.85},
    ),
    ModelInfo(
        name="Resume Classification",
        version="1.0.0",
        type="Classification",
        metrics={"Accuracy": 0.91, "F1-Score": 0.88},
    ),
)


def list_models() -> list[ModelInfo]:
    return list(MODEL_CATALOG)
