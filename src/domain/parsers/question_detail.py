"""Parser for the ``getQuestionDetail`` GraphQL response."""

from typing import Any

from loguru import logger

from domain.extractor import Field
from domain.models import CodeDefinition, MetaData, MetaParam, Question, Stats


def parse_question(payload: Any) -> Question:
    """
    Build a Question from a detail response.

    ``stats``, ``codeDefinition`` and ``metaData`` arrive as JSON encoded
    strings and are decoded a second time. Nothing is returned unless every
    field parses.
    """
    question = Field(payload).get("data").get("question")

    result = Question(
        content=question.get("content", None).as_str(""),
        stats=_parse_stats(question.get("stats").decoded()),
        defs=[_parse_definition(d) for d in question.get("codeDefinition").decoded().items()],
        case=question.get("sampleTestCase").as_str(),
        metadata=_parse_metadata(question.get("metaData").decoded()),
        test=question.get("enableRunCode").as_bool(),
        t_content=question.get("translatedContent", None).as_str(""),
    )

    logger.debug(f"Parsed question with {len(result.defs)} code definitions")
    return result


def _parse_stats(stats: Field) -> Stats:
    return Stats(
        total_accepted=stats.get("totalAccepted").as_str(),
        total_submission=stats.get("totalSubmission").as_str(),
        total_accepted_raw=stats.get("totalAcceptedRaw").as_int(),
        total_submission_raw=stats.get("totalSubmissionRaw").as_int(),
        ac_rate=stats.get("acRate").as_str(),
    )


def _parse_definition(definition: Field) -> CodeDefinition:
    return CodeDefinition(
        value=definition.get("value").as_str(),
        text=definition.get("text").as_str(),
        default_code=definition.get("defaultCode").as_str(),
    )


def _parse_metadata(metadata: Field) -> MetaData:
    # Design and SQL problems omit name/params/return, keep the raw object for them
    params = [
        MetaParam(name=p.get("name").as_str(), type=p.get("type").as_str())
        for p in metadata.get("params", []).items()
    ]
    return_type = metadata.get("return", None)
    return MetaData(
        name=metadata.get("name", None).as_str(None),
        params=params,
        return_type=return_type.get("type").as_str() if return_type.value is not None else None,
        raw=metadata.as_object(),
    )
