"""Domain errors raised by the room core."""


class MoodRoomError(Exception):
    """Base exception for room operations."""

    pass


class InvalidEmotionError(MoodRoomError):
    """Submitted emotion is not one of the supported categories."""

    def __init__(self, emotion: object):
        self.emotion = emotion
        super().__init__(f"Invalid emotion: {emotion!r}")


class InvalidParticipantError(MoodRoomError):
    """Participant token is missing or malformed."""

    pass
