# lambda/lexweigh/observability.py
import logging
import os
import sys

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

SERVICE = os.getenv("POWERTOOLS_SERVICE_NAME", "lexweigh")
NAMESPACE = os.getenv("POWERTOOLS_METRICS_NAMESPACE", "Lexweigh")
ENV = os.getenv("ENV", "dev")

# stdout carries the word/definition pairs, so logs go to stderr
logger  = Logger(service=SERVICE, logger_handler=logging.StreamHandler(sys.stderr))
metrics = Metrics(namespace=NAMESPACE)


def set_debug(enabled: bool) -> None:
    if enabled:
        logger.setLevel(logging.DEBUG)


def record_success(words: int, definitions: int, pairs: int, env: str | None = None):
    """
    Emit counters for one processed lexicon:
      - RunsProcessed: 1 per successful run
      - WordsWeighed: words that were segmented and ranked
      - PairsEmitted: word/definition lines produced
      - DefinitionsDiscarded: definitions left over once words ran out
    """
    metrics.add_dimension(name="service", value=SERVICE)
    metrics.add_dimension(name="env", value=env or ENV)

    metrics.add_metric(name="RunsProcessed", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name="WordsWeighed", unit=MetricUnit.Count, value=words)
    metrics.add_metric(name="PairsEmitted", unit=MetricUnit.Count, value=pairs)
    metrics.add_metric(name="DefinitionsDiscarded", unit=MetricUnit.Count,
                       value=max(0, definitions - words))


def record_error(env: str | None = None):
    """Emit an error counter for runs that aborted."""
    metrics.add_dimension(name="service", value=SERVICE)
    metrics.add_dimension(name="env", value=env or ENV)
    metrics.add_metric(name="Errors", unit=MetricUnit.Count, value=1)
