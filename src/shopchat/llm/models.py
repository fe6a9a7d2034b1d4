from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message sent to a completion endpoint."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'system', 'user' or 'assistant'")
    content: str = Field(description="Content of the message")


class CompletionRequest(BaseModel):
    """A single-turn completion request.

    Only the latest user turn is sent; earlier messages of the chat
    never reach the endpoint.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(description="The user's latest message")
    system_prompt: str = Field(description="Instruction constraining tone and scope")

    def to_messages(self) -> list[ChatMessage]:
        """Build the `[system, user]` message list for the endpoint."""
        return [
            ChatMessage(role="system", content=self.system_prompt),
            ChatMessage(role="user", content=self.prompt),
        ]
