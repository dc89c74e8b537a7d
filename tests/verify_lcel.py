from langchain_core.prompts import ChatPromptTemplate
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage
from langchain_core.outputs import ChatResult, ChatGeneration
from axon_parser import AxonOutputParser, FieldDefinition, ParseResult, Schema, TypeTag

# 1. Define Schema
user_schema = Schema(
    "User",
    (
        FieldDefinition("name", TypeTag.STRING),
        FieldDefinition("age", TypeTag.INTEGER),
        FieldDefinition("hobbies", TypeTag.STRING, nullable=True),
    ),
)

# 2. Setup Parser
parser = AxonOutputParser(schemas=[user_schema])

# 3. Setup Fake LLM that returns Axon
class FakeAxonChatModel(BaseChatModel):
    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        content = "```axon\n@schema User\nname:S\nage:I\nhobbies:S?\n@end\n@data User[1]\nJohn|25|soccer, coding\n@end\n```"
        return ChatResult(generations=[ChatGeneration(message=AIMessage(content=content))])

    @property
    def _llm_type(self) -> str:
        return "fake-axon-chat-model"

llm = FakeAxonChatModel()

# 4. Setup Prompt
prompt = ChatPromptTemplate.from_messages([
    ("human", "Describe {input}\n\n{format_instructions}")
])

# 5. TEST LCEL
print("--- Testing LCEL Chain ---")
try:
    chain = prompt | llm | parser
    result = chain.invoke({
        "input": "John, 25 years old, likes soccer and coding.",
        "format_instructions": parser.get_format_instructions(),
    })
    print(f"Result type: {type(result)}")
    print(f"Result data: {result}")

    assert isinstance(result, ParseResult)
    assert result.data_blocks[0].rows[0]["name"] == "John"
    print("✅ LCEL Integration Verified Success!")
except Exception as e:
    print(f"❌ LCEL Integration Failed: {e}")
    import traceback
    traceback.print_exc()
