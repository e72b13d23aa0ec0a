"""Diff validation models."""

from pydantic import BaseModel, Field, computed_field


class PlaceholderOccurrence(BaseModel):
    """One placeholder occurrence found while scanning a document."""

    placeholder: str = Field(description="Exact matched text")
    location: int | str = Field(
        description="1-based body paragraph index or compound table label"
    )
    context: str = Field(description="Full text of the containing paragraph")
    pattern: str = Field(description="Regex source that matched")


class ReplacementDetail(BaseModel):
    placeholder: str
    location: int | str
    context: str
    replaced: bool
    pattern: str


class DocumentDiffReport(BaseModel):
    """Comparison of an original and a processed document."""

    total_placeholders_found: int = 0
    successful_replacements: int = 0
    failed_replacements: int = 0
    missed_placeholders: list[PlaceholderOccurrence] = Field(default_factory=list)
    replacement_details: list[ReplacementDetail] = Field(default_factory=list)
    validation_passed: bool = False

    @computed_field
    @property
    def success_rate(self) -> float:
        if self.total_placeholders_found == 0:
            return 0.0
        return round(self.successful_replacements / self.total_placeholders_found * 100, 2)

    @property
    def missed(self) -> list[str]:
        return [occurrence.placeholder for occurrence in self.missed_placeholders]


class ExpectedPlaceholderResult(BaseModel):
    """Found-counts of one expected token in both documents."""

    expected: str
    found_in_original: int
    found_in_processed: int
    successfully_replaced: bool
    locations_original: list[PlaceholderOccurrence] = Field(default_factory=list)
    locations_processed: list[PlaceholderOccurrence] = Field(default_factory=list)
