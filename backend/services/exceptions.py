"""Error taxonomy for the analysis API.

Every error carries the HTTP status and the message that is safe to show the
client. Downstream failures share one generic message so the client cannot
tell whether extraction or generation broke.
"""


class ResumeAnalyzerError(Exception):
    status_code: int = 500
    message: str = "An error occurred during resume analysis"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class InvalidUpload(ResumeAnalyzerError):
    """Raised when the client sent an unusable upload"""

    status_code = 400


class MissingFile(InvalidUpload):
    message = "No resume file uploaded"


class UnsupportedFileType(InvalidUpload):
    message = "Only PDF files are allowed"


class InvalidFormField(InvalidUpload):
    """Raised when a form field has the wrong shape, e.g. a file for a text field"""

    message = "Invalid form field"

    def __init__(self, field: str | None = None):
        if field:
            self.message = f"Invalid form field: {field}"
        super().__init__()


class AnalysisFailure(ResumeAnalyzerError):
    """Raised when a downstream collaborator fails; detail is for logs only"""

    status_code = 500


class ExtractionFailure(AnalysisFailure):
    """Raised when the PDF cannot be read"""


class GenerationFailure(AnalysisFailure):
    """Raised when the Gemini call fails or returns nothing"""
