from fastapi import Depends, Request

from paybroker.core.config import Settings
from paybroker.services.payment_service import PaymentService
from paybroker.services.provider import PaymentProvider
from paybroker.services.webhook_service import WebhookService

# Settings and the provider are created once in create_app() and kept on
# app.state, so handlers get them injected instead of importing globals.
# Tests swap either one by passing their own to create_app().


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payment_provider(request: Request) -> PaymentProvider:
    return request.app.state.provider


def get_payment_service(
    provider: PaymentProvider = Depends(get_payment_provider),
    settings: Settings = Depends(get_app_settings),
) -> PaymentService:
    return PaymentService(provider, settings)


def get_webhook_service(settings: Settings = Depends(get_app_settings)) -> WebhookService:
    return WebhookService(settings)
