from .delay import delay, delay_option, delay_w, delayM

__all__ = (
    "delay",
    "delay_option",
    "delay_w",
    "delayM",
)
