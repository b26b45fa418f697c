from fastapi import Request

from app.config.settings import Settings
from app.processor.processor import Processor


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> Processor:
    return request.app.state.processor
