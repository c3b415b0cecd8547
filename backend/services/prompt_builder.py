"""Prompt templates for the Gemini skill-gap comparison."""

SYSTEM_INSTRUCTION = "You are a helpful HR analyst that only responds in strict JSON format."


def build_prompt(
    job_title: str,
    resume_text: str,
    market_snippet: str,
    language: str = "Korean",
) -> str:
    """Render the comparison prompt for one analysis request.

    The output-format block must stay in sync with SkillAnalysisResult:
    the response parser rejects anything without exactly these four keys.
    """
    return f"""[CONTEXT]: You are a senior HR technology analyst. Your only job is to extract accurate technology stacks.
[MY_RESUME]: {resume_text}
[MARKET_DATA]: (scraped job board postings: {market_snippet})

[TASK]:
1. Analyze [MARKET_DATA] and extract *only* the technology stack required for the '{job_title}' role: programming languages, frameworks, databases, cloud and infrastructure tools.
2. *Never* extract company categories or job titles such as 'web agency', 'network engineer', 'security engineer' or 'backend developer'.
3. (Examples of valid technology/tool tokens: 'AWS', 'Kubernetes', 'Docker', 'JPA', 'MySQL', 'Python', 'Node.js'.)
4. Compare the technology stack in [MY_RESUME] with the market technology stack extracted in step 1.
5. In the response, say "my resume" and "market requirements" instead of the tags [MY_RESUME] and [MARKET_DATA].
6. Write every prose field (summary, project title, project description) in formal, fluent, well-formed {language}. *Never* return garbled text, mixed languages or unknown symbols.

[OUTPUT_FORMAT]: The response must be *only* a single raw JSON object. Do not wrap it in Markdown code fences and do not add any text before or after it.
The JSON object must have exactly these 4 keys:
1. "mySkills": technology stack items found in both [MY_RESUME] and [MARKET_DATA] (string[]).
2. "skillGaps": technology stack items that appear frequently in [MARKET_DATA] but are missing from [MY_RESUME] (string[]).
3. "summary": an overall assessment comparing [MY_RESUME] with [MARKET_DATA] (string, in {language}).
4. "projectSuggestions": 2 recommended projects that would close the skillGaps (array of {{"title": string, "description": string}}, written in {language}).
"""
