"""FastAPI アプリケーション"""
import io
import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from config import settings
from divination import DivinationInput, EngineOptions, EnvironmentData
from divination.engines import TarotEngine
from divination.registry import ENGINE_REGISTRY, get_engine, run_integrated
from divination.three_layer import generate_three_layer_interpretation, get_tradition
from reports import PDFGenerator, ReportGenerator

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level,
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="占術エンジン API",
    description="タロット・易経・マヤ暦などの占術を計算するAPI",
    version="1.0.0"
)

report_generator = ReportGenerator()


# リクエストモデル
class DivinationRequest(BaseModel):
    input: DivinationInput
    environment: Optional[EnvironmentData] = None
    options: Optional[EngineOptions] = None


class IntegratedRequest(BaseModel):
    input: DivinationInput
    environment: Optional[EnvironmentData] = None
    options: Optional[EngineOptions] = None
    types: Optional[List[str]] = None


def _calculate(divination_type: str, request: DivinationRequest):
    engine = get_engine(divination_type, request.input, request.environment, request.options)
    result = engine.calculate()
    three_layer = generate_three_layer_interpretation(divination_type, result, request.environment)
    return result, three_layer


@app.get("/")
async def root():
    """サービス情報"""
    return {
        "message": "占術エンジン API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/api/health")
async def health():
    return {"status": "ok", "engines": list(ENGINE_REGISTRY)}


@app.get("/api/divination/types")
async def divination_types():
    """利用できる占術の一覧"""
    return {
        "success": True,
        "data": [
            {"type": divination_type, "tradition": get_tradition(divination_type)['core_system']}
            for divination_type in ENGINE_REGISTRY
        ]
    }


@app.post("/api/divination/iching/visual")
async def iching_visual(request: DivinationRequest):
    """易経の卦をPNGで返す"""
    try:
        result, _ = _calculate('iching', request)
        visual = report_generator.generate_hexagram_image(result)

        return StreamingResponse(
            io.BytesIO(visual),
            media_type="image/png",
            headers={"Content-Disposition": "attachment; filename=hexagram.png"}
        )
    except Exception as e:
        logger.error(f"Hexagram image failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/divination/numerology/visual")
async def numerology_visual(request: DivinationRequest):
    """数秘マトリクスをPNGで返す"""
    try:
        result, _ = _calculate('numerology', request)
        visual = report_generator.generate_visual_matrix(result)

        return StreamingResponse(
            io.BytesIO(visual),
            media_type="image/png",
            headers={"Content-Disposition": "attachment; filename=matrix.png"}
        )
    except Exception as e:
        logger.error(f"Matrix image failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/divination/{divination_type}")
async def divine(divination_type: str, request: DivinationRequest):
    """占術を実行し、3層解釈と共に返す"""
    try:
        result, three_layer = _calculate(divination_type, request)

        return {
            "success": True,
            "data": {
                "type": divination_type,
                "result": result.model_dump(),
                "three_layer": three_layer.model_dump()
            }
        }
    except Exception as e:
        logger.error(f"Divination {divination_type} failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/divination/{divination_type}/report")
async def divine_report(divination_type: str, request: DivinationRequest):
    """占術結果をテキスト鑑定書と共に返す"""
    try:
        result, three_layer = _calculate(divination_type, request)
        report = report_generator.generate_text_report(request.input, divination_type, result, three_layer)

        return {
            "success": True,
            "report": report,
            "data": result.model_dump()
        }
    except Exception as e:
        logger.error(f"Report for {divination_type} failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/divination/{divination_type}/pdf")
async def divine_pdf(divination_type: str, request: DivinationRequest):
    """PDF鑑定書を返す"""
    try:
        result, _ = _calculate(divination_type, request)
        pdf = PDFGenerator().generate_pdf(request.input, divination_type, result)

        return StreamingResponse(
            io.BytesIO(pdf),
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={divination_type}.pdf"}
        )
    except Exception as e:
        logger.error(f"PDF for {divination_type} failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/api/integrated")
async def integrated(request: IntegratedRequest):
    """複数の占術による統合鑑定"""
    try:
        data = run_integrated(request.input, request.environment, request.types, request.options)

        return {
            "success": True,
            "data": data
        }
    except Exception as e:
        logger.error(f"Integrated reading failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/tarot/spreads")
async def tarot_spreads():
    return {
        "success": True,
        "data": TarotEngine(DivinationInput()).get_available_spreads()
    }


@app.get("/api/tarot/cards/{index}")
async def tarot_card(index: int):
    """カードのプレビュー"""
    card = TarotEngine(DivinationInput()).get_card_preview(index)

    if card is None:
        raise HTTPException(status_code=404, detail="Card not found")

    return {
        "success": True,
        "data": card
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
