class RequestFailed(Exception):
    """
    A backend call that did not succeed: the network failed or the backend
    answered with a status the caller does not accept.

    ``message`` is what ends up in front of the user.
    """
    code = "REQUEST_FAILED"
    message = "Request failed"

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class SearchFailed(RequestFailed):
    code = "SEARCH_FAILED"
    message = "Search failed"

class ReviewsLoadFailed(RequestFailed):
    code = "REVIEWS_LOAD_FAILED"
    message = "Failed to load reviews."

class ReviewSubmitFailed(RequestFailed):
    code = "REVIEW_SUBMIT_FAILED"
    message = "Submit failed"

class ReviewDeleteFailed(RequestFailed):
    code = "REVIEW_DELETE_FAILED"
    message = "Delete failed"


# Raised by the development backend and turned into {"error": ...} bodies.
class BackendError(Exception):
    code = "BACKEND_ERROR"
    message = "Request could not be handled"
    status_code = 400

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class InvalidRequestError(BackendError):
    code = "INVALID_REQUEST"
    message = "The request is invalid"

class MovieNotFoundError(BackendError):
    code = "MOVIE_NOT_FOUND"
    message = "Movie not found!"
    status_code = 404

class ReviewNotFoundError(BackendError):
    code = "REVIEW_NOT_FOUND"
    message = "Review not found"
    status_code = 404
