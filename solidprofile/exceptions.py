class ProfileResolutionError(Exception):
    pass


class DocumentResolutionError(ProfileResolutionError):
    pass


class DocumentParseError(ProfileResolutionError):
    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url
