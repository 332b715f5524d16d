# app/routers/llm_health.py
from fastapi import APIRouter, Depends

from app.api.deps import get_llm_client
from app.llm.client import LLMClient
from app.llm.errors import LLMError

router = APIRouter(prefix="/api/llm", tags=["llm"])

@router.get("/health")
async def llm_health(client: LLMClient = Depends(get_llm_client)):
    if not client.enabled:
        return {"ok": False, "enabled": False, "provider": client.provider.name}

    try:
        resp = await client.generate(
            purpose="healthcheck",
            prompt_name="healthcheck",
            prompt_version="v1",
            variables={},
        )
    except LLMError as e:
        return {"ok": False, "enabled": True, "provider": client.provider.name, "error": type(e).__name__}

    return {"ok": True, "enabled": True, "provider": resp.provider, "model": resp.model, "sample": resp.output_text[:200]}
