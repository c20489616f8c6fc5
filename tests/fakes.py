class FakeLLM:
    """Stands in for OpenAIClient; records every call it gets."""

    def __init__(self, content="", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def chat_completion(self, messages, temperature=0.2, response_format=None):
        self.calls.append({"messages": messages, "temperature": temperature, "response_format": response_format})
        if self.error is not None:
            raise self.error
        return self.content
