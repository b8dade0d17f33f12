from models.gemini import GenerateContentRequest, Part, Turn
from config.settings import settings

class PromptBuilder:
    @staticmethod
    def build_prompt(text: str, template: str | None = None) -> str:
        """
        Prefixes the user's text with the summarization instruction.
        """
        instruction = template if template is not None else settings.ui.prompt_template
        return f"{instruction}\n\n{text}"

    @staticmethod
    def build_summarization_payload(text: str, template: str | None = None) -> dict:
        """
        Builds the generateContent body: a single user turn, no chat history.
        """
        prompt = PromptBuilder.build_prompt(text, template)
        request = GenerateContentRequest(
            contents=[Turn(role="user", parts=[Part(text=prompt)])]
        )
        return request.model_dump()
