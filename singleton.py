import threading


class Singleton:
    """Lazy, thread-safe single instance per subclass"""

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def instance(cls, *args, **kwargs):
        # Double-checked: only the first caller pays for the lock
        if cls.__dict__.get("_instance") is None:
            with cls._lock:
                if cls.__dict__.get("_instance") is None:
                    cls._instance = cls(*args, **kwargs)
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls.__dict__.get("_instance") is not None
