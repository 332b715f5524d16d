# app/llm/prompts/templates.py

JUSTIFY_MAPPING_V1 = """
Generate a concise single-sentence justification for CO-PO mapping in this exact format:

Format: "CO X aligned with PO Y based on [competency description] ([PI reference])"

Example: "CO 1 aligned with PO1 based on demonstrating competence in engineering concepts (1.3.1)"

Context:
- Course Outcome: {{co_id}} - "{{co_description}}" (cognitive level {{co_level}})
- Program Outcome: {{outcome_id}} - "{{outcome_title}}" (required cognitive level {{outcome_level}})
- Correlation strength already decided: {{correlation_value}}
- Matching Competency: {{competency_id}} - "{{competency_description}}"
- Performance Indicator: {{pi_id}} - "{{pi_description}}"
{{syllabus_context}}

Requirements:
1. Output format: "CO {{co_number}} aligned with {{outcome_id}} based on [brief competency description] ({{pi_id}})"
2. Use the competency description from: "{{competency_description}}"
3. Keep it concise - maximum 30 words
4. Single sentence only, plain text, no quotes, no markdown
5. Include the PI reference in parentheses: ({{pi_id}})
6. Do NOT include K-level explanation or correlation level details
7. Do NOT include full CO or PO descriptions - just the alignment statement

{{__REPAIR_INSTRUCTIONS__}}

Generate the justification:
""".strip()


HEALTHCHECK_V1 = """
Reply with the single word OK.
""".strip()
