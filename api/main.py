"""FastAPI приложение"""
from fastapi import FastAPI, Depends, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse
from typing import Optional
from pydantic import BaseModel
import io
import logging

from config import Settings, get_settings
from generation import GeminiTransport, ResilientGenerativeClient, parse_candidates
from name_grid import NameGridCalculator
from numerology import NumerologyCalculator
from reading import ReadingError, ReadingOrchestrator, Subject, SubjectValidationError, validate_subject
from reports import ReportGenerator

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)

# Локальные калькуляторы без состояния, общие для всех запросов
numerology_calculator = NumerologyCalculator()
name_grid_calculator = NameGridCalculator()
report_generator = ReportGenerator()


# Модели запросов
class SubjectRequest(BaseModel):
    name: str
    birthday: str

    def to_subject(self) -> Subject:
        return Subject(name=self.name, birthday=self.birthday)


class ReadingRequest(BaseModel):
    user: SubjectRequest
    partner: Optional[SubjectRequest] = None

    def partner_subject(self) -> Optional[Subject]:
        # Пустая форма партнера означает личный режим
        if self.partner is None or not self.partner.name.strip():
            return None
        return self.partner.to_subject()


def get_orchestrator(request: Request) -> ReadingOrchestrator:
    """Оркестратор, созданный при старте приложения"""
    orchestrator = getattr(request.app.state, 'orchestrator', None)
    if orchestrator is None:
        raise HTTPException(status_code=503, detail="Service is starting")
    return orchestrator


def raise_http(error: ReadingError):
    """Переводит ошибку прочтения в HTTP-ответ"""
    logger.warning(f"Прочтение не построено ({error.status_code}): {error.message}")
    raise HTTPException(status_code=error.status_code, detail=error.message)


def create_app(settings: Optional[Settings] = None,
               orchestrator: Optional[ReadingOrchestrator] = None) -> FastAPI:
    """Создает приложение; без orchestrator открывает транспорт Gemini при старте"""
    app = FastAPI(
        title="Aetheris Reading API",
        description="API для нумерологии, пяти решеток имени и прочтения",
        version="1.0.0"
    )
    app.state.orchestrator = orchestrator

    if orchestrator is None:
        # Без ключа процесс падает здесь, а не на первом запросе
        settings = settings or get_settings()
        transport = GeminiTransport(
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            temperature=settings.generation_temperature,
            max_output_tokens=settings.generation_max_output_tokens
        )
        candidates = parse_candidates(settings.generation_candidates)

        @app.on_event("startup")
        async def startup_event():
            await transport.open()
            client = ResilientGenerativeClient(
                transport,
                candidates=candidates,
                timeout=settings.generation_timeout
            )
            app.state.orchestrator = ReadingOrchestrator(
                client,
                numerology=numerology_calculator,
                name_grid=name_grid_calculator
            )
            logger.info(f"Порядок моделей: {', '.join(str(c) for c in candidates)}")

        @app.on_event("shutdown")
        async def shutdown_event():
            await transport.close()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Неверная форма запроса - та же ошибка ввода, что и неверная дата
        logger.warning(f"Неверный запрос {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    register_routes(app)
    return app


def register_routes(app: FastAPI):
    """API endpoints"""

    @app.get("/")
    async def root():
        """Корневой endpoint"""
        return {
            "message": "Aetheris Reading API",
            "version": "1.0.0",
            "docs": "/docs"
        }

    @app.post("/api/calculate")
    async def calculate(request: SubjectRequest):
        """Только локальные расчеты, без обращения к модели"""
        subject = request.to_subject()
        try:
            validate_subject(subject)
        except SubjectValidationError as e:
            raise_http(e)

        numerology = numerology_calculator.calculate(subject.birthday)
        name_grid = name_grid_calculator.calculate(subject.name)
        return {
            "success": True,
            "data": {
                "numerology": numerology_calculator.to_report(numerology),
                "nameGrid": name_grid_calculator.to_report(name_grid)
            }
        }

    @app.post("/api/reading")
    async def build_reading(
        request: ReadingRequest,
        orchestrator: ReadingOrchestrator = Depends(get_orchestrator)
    ):
        """Полное прочтение"""
        try:
            report = await orchestrator.build_reading(request.user.to_subject(), request.partner_subject())
        except ReadingError as e:
            raise_http(e)

        return {
            "success": True,
            "data": report.model_dump()
        }

    @app.post("/api/reading/report")
    async def build_reading_report(
        request: ReadingRequest,
        orchestrator: ReadingOrchestrator = Depends(get_orchestrator)
    ):
        """Полное прочтение с текстовым отчетом"""
        subject = request.user.to_subject()
        partner = request.partner_subject()
        try:
            report = await orchestrator.build_reading(subject, partner)
        except ReadingError as e:
            raise_http(e)

        return {
            "success": True,
            "report": report_generator.generate_text_report(subject, report, partner),
            "data": report.model_dump()
        }

    @app.get("/api/numerology/visual")
    async def numerology_visual(birthday: str = Query(...)):
        """Квадрат Ло Шу в виде PNG"""
        result = numerology_calculator.calculate(birthday)
        visual = report_generator.generate_visual_grid(result)

        return StreamingResponse(
            io.BytesIO(visual),
            media_type="image/png",
            headers={"Content-Disposition": "attachment; filename=lo_shu.png"}
        )


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
