"""Data Transfer Objects for application layer."""

from nlogin_web.application.dtos.account_dto import RegisterAccountDTO

__all__ = ["RegisterAccountDTO"]
