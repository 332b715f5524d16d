# app/services/matrix_service.py
"""
matrix_service.py
- Purpose: Orchestrates the "generate CO-PO-PSO matrix" workflow.
- Owns: request -> domain conversion, context tagging, response shaping.
- Design: Thick service; routers remain thin and easy to reason about.
"""

import logging

from app.core.request_context import set_context
from app.mapping.assembler import MatrixAssembler
from app.schemas.matrix_schema import MatrixRequest, MatrixResponse

logger = logging.getLogger("app.matrix_service")


class MatrixService:
    def __init__(self, assembler: MatrixAssembler):
        self.assembler = assembler

    async def generate(self, req: MatrixRequest) -> MatrixResponse:
        set_context(course_code=req.course_code)

        course_outcomes = [co.to_domain() for co in req.course_outcomes]
        logger.info(
            "matrix.requested",
            extra={
                "course_name": req.course_name,
                "course_outcomes": len(course_outcomes),
                "has_syllabus": req.syllabus_data is not None,
            },
        )

        result = await self.assembler.build_matrix(course_outcomes, req.syllabus_data)
        return MatrixResponse.from_result(result)
