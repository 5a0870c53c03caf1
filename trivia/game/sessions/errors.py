class QuizError(Exception):
    pass


class InvalidQuestionCountError(QuizError):
    pass


class InvalidOutcomeError(QuizError):
    pass


class NoCurrentQuestionError(QuizError):
    pass


class InvalidAnswerOptionError(QuizError):
    pass


class InvalidSessionStateError(QuizError):
    pass


class QuestionSourceError(QuizError):
    pass


class OpenTriviaError(QuestionSourceError):
    def __init__(self, response_code: int, message: str) -> None:
        super().__init__(f"open trivia response_code={response_code}: {message}")
        self.response_code = response_code
