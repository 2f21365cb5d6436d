"""Core services: frame sequence driver, artifact output, settings, and logging."""

from .config import AppConfig, default_output_dir, load_config, save_config
from .diagnostics import build_doctor_payload
from .driver import DriverState, FrameRecord, FrameSequenceDriver, RenderReport
from .generator import RenderJob, generate
from .output import ArtifactWriter, output_path

__all__ = [
    "AppConfig",
    "ArtifactWriter",
    "DriverState",
    "FrameRecord",
    "FrameSequenceDriver",
    "RenderJob",
    "RenderReport",
    "build_doctor_payload",
    "default_output_dir",
    "generate",
    "load_config",
    "output_path",
    "save_config",
]
