import logging
from routemap.core.trace import trace_id_var

LOG_FORMAT = "%(asctime)s [%(levelname)s] [trace_id=%(trace_id)s] %(name)s: %(message)s"


class TraceLogFilter(logging.Filter):
    def filter(self, record):
        record.trace_id = trace_id_var.get() or "-"
        return True


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # handler-level so records propagated from module loggers get a trace_id too
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, TraceLogFilter) for f in handler.filters):
            handler.addFilter(TraceLogFilter())
