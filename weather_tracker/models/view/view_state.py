from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_tracker.models.weather.weather import WeatherReport
from weather_tracker.utils.background import BackgroundCategory


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ViewState(BaseModel):
    """
    Presentation state for a single weather page.

    The state is immutable: every transition returns a new value. Each lookup
    is tagged with ``request_seq``; completions carrying an older sequence
    number are ignored so that a slow earlier response cannot overwrite a
    newer one.
    """

    model_config = ConfigDict(frozen=True)

    status: ViewStatus = Field(ViewStatus.IDLE, description="Current lookup phase")
    report: Optional[WeatherReport] = Field(None, description="Last successful report")
    error: str = Field("", description="Message shown to the user")
    is_celsius: bool = Field(True, description="Temperature unit preference")
    dark_mode: bool = Field(False, description="Theme preference")
    background_image: Optional[str] = Field(None, description="Decorative image URL")
    background_category: BackgroundCategory = Field(
        BackgroundCategory.DEFAULT, description="Condition-based background"
    )
    request_seq: int = Field(0, ge=0, description="Sequence number of the latest lookup")

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    def is_current(self, seq: int) -> bool:
        return seq == self.request_seq

    def start_loading(self) -> "ViewState":
        """Begin a new lookup; the returned state's ``request_seq`` tags it."""
        return self.model_copy(
            update={
                "status": ViewStatus.LOADING,
                "error": "",
                "request_seq": self.request_seq + 1,
            }
        )

    def succeed(
        self,
        seq: int,
        report: WeatherReport,
        category: BackgroundCategory = BackgroundCategory.DEFAULT,
    ) -> "ViewState":
        if not self.is_current(seq):
            return self
        return self.model_copy(
            update={
                "status": ViewStatus.SUCCESS,
                "report": report,
                "error": "",
                "background_category": category,
                "background_image": None,
            }
        )

    def fail(self, seq: int, message: str) -> "ViewState":
        if not self.is_current(seq):
            return self
        return self.model_copy(update={"status": ViewStatus.ERROR, "error": message})

    def with_background(self, seq: int, image_url: Optional[str]) -> "ViewState":
        if not self.is_current(seq) or self.status is not ViewStatus.SUCCESS:
            return self
        return self.model_copy(update={"background_image": image_url})

    def set_units(self, is_celsius: bool) -> "ViewState":
        return self.model_copy(update={"is_celsius": is_celsius})

    def toggle_theme(self) -> "ViewState":
        return self.model_copy(update={"dark_mode": not self.dark_mode})
