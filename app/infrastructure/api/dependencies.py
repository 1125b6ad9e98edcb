# app/infrastructure/api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.credit_note_validator import CreditNoteValidator
from app.application.use_cases.authenticate_user import AuthenticateUserUseCase
from app.application.use_cases.export_credit_note_pdf import ExportCreditNotePdfUseCase
from app.application.use_cases.list_credit_notes import ListCreditNotesUseCase
from app.application.use_cases.manage_banks import ManageBanksUseCase
from app.application.use_cases.manage_credit_notes import ManageCreditNotesUseCase
from app.application.use_cases.manage_form_configuration import ManageFormConfigurationUseCase
from app.application.use_cases.submit_credit_note import SubmitCreditNoteUseCase
from app.infrastructure.external.credentials_adapter import JWTTokenIssuer, PasslibPasswordHasher
from app.infrastructure.external.num2words_adapter import Num2WordsTranscriber
from app.infrastructure.external.reportlab_pdf_adapter import ReportLabCreditNoteRenderer
from app.infrastructure.persistence.bank_repository_adapter import SQLAlchemyBankRepository
from app.infrastructure.persistence.credit_note_repository_adapter import SQLAlchemyCreditNoteRepository
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.form_configuration_repository_adapter import (
    SQLAlchemyFormConfigurationRepository,
)
from app.infrastructure.persistence.user_repository_adapter import SQLAlchemyUserRepository

# Adaptadores sin estado por petición
transcriber = Num2WordsTranscriber()
renderer = ReportLabCreditNoteRenderer()
password_hasher = PasslibPasswordHasher()


def get_bank_use_case(db: Session = Depends(get_db)) -> ManageBanksUseCase:
    return ManageBanksUseCase(bank_repo=SQLAlchemyBankRepository(db))


def get_form_configuration_use_case(db: Session = Depends(get_db)) -> ManageFormConfigurationUseCase:
    return ManageFormConfigurationUseCase(config_repo=SQLAlchemyFormConfigurationRepository(db))


def _validator(db: Session) -> CreditNoteValidator:
    return CreditNoteValidator(transcriber=transcriber, bank_repo=SQLAlchemyBankRepository(db))


def get_submit_use_case(db: Session = Depends(get_db)) -> SubmitCreditNoteUseCase:
    return SubmitCreditNoteUseCase(
        note_repo=SQLAlchemyCreditNoteRepository(db),
        config_provider=SQLAlchemyFormConfigurationRepository(db),
        validator=_validator(db),
    )


def get_manage_credit_notes_use_case(db: Session = Depends(get_db)) -> ManageCreditNotesUseCase:
    return ManageCreditNotesUseCase(note_repo=SQLAlchemyCreditNoteRepository(db), validator=_validator(db))


def get_list_use_case(db: Session = Depends(get_db)) -> ListCreditNotesUseCase:
    return ListCreditNotesUseCase(note_repo=SQLAlchemyCreditNoteRepository(db))


def get_export_pdf_use_case(db: Session = Depends(get_db)) -> ExportCreditNotePdfUseCase:
    return ExportCreditNotePdfUseCase(note_repo=SQLAlchemyCreditNoteRepository(db), renderer=renderer)


def get_auth_use_case(db: Session = Depends(get_db)) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        user_repo=SQLAlchemyUserRepository(db),
        hasher=password_hasher,
        token_issuer=JWTTokenIssuer(),
    )
