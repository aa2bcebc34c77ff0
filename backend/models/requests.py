from enum import Enum


class AnalysisMode(str, Enum):
    QUICK_SCAN = "Quick Scan"
    DETAILED_ANALYSIS = "Detailed Analysis"
    ATS_OPTIMIZATION = "ATS Optimization"

    @classmethod
    def from_option(cls, option: "str | AnalysisMode | None") -> "AnalysisMode":
        """Resolve a client-supplied option by exact value match.

        Anything that is not an exact member value, None included, selects
        ATS Optimization.
        """
        try:
            return cls(option)
        except ValueError:
            return cls.ATS_OPTIMIZATION


DEFAULT_ANALYSIS_OPTION = AnalysisMode.QUICK_SCAN.value
