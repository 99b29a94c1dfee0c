"""GraphQL documents and request bodies."""

from pydantic import BaseModel, ConfigDict, Field

# Fields must match what domain.parsers.question_detail reads
QUESTION_DETAIL_QUERY = "\n".join(
    [
        "query getQuestionDetail($titleSlug: String!) {",
        "  question(titleSlug: $titleSlug) {",
        "    content",
        "    stats",
        "    codeDefinition",
        "    sampleTestCase",
        "    enableRunCode",
        "    metaData",
        "    translatedContent",
        "  }",
        "}",
    ]
)

QUESTION_DETAIL_OPERATION = "getQuestionDetail"


class QuestionDetailVariables(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title_slug: str = Field(alias="titleSlug")


class GraphQLPayload(BaseModel):
    """Body of a GraphQL POST."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    query: str
    variables: QuestionDetailVariables
    operation_name: str = Field(alias="operationName")

    @classmethod
    def question_detail(cls, slug: str) -> "GraphQLPayload":
        return cls(
            query=QUESTION_DETAIL_QUERY,
            variables=QuestionDetailVariables(title_slug=slug),
            operation_name=QUESTION_DETAIL_OPERATION,
        )
