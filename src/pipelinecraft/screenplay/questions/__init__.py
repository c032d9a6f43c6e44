"""Read-only questions actors can answer."""

from pipelinecraft.screenplay.questions.api_response import ApiResponse
from pipelinecraft.screenplay.questions.page_element import PageElement
from pipelinecraft.screenplay.questions.remembered import Remembered

__all__ = ["ApiResponse", "PageElement", "Remembered"]
