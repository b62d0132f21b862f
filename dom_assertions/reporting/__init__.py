from .result_reporter import (
    DomAssertionFailure,
    RaisingReporter,
    ResultCollector,
    ResultReporter,
    SoftAssertionReporter,
)

__all__ = [
    'DomAssertionFailure',
    'RaisingReporter',
    'ResultCollector',
    'ResultReporter',
    'SoftAssertionReporter',
]
