from sysload.config.env_property_provider import EnvPropertyProvider


class ConfigManager:

    def __init__(self, property_provider=EnvPropertyProvider()):
        self.__property_provider = property_provider

    def get_str(self, key, default=None) -> str:
        value = self.__property_provider.get(key)

        if value is None:
            return default
        else:
            return value

    def get_float(self, key, default=None) -> float:
        return float(self.get_str(key, default))

    def get_int(self, key, default=None) -> int:
        return int(self.get_str(key, default))
