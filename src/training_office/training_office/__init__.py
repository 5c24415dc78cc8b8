"""Training Office package.

Back-office helpers for a training institute, organized by feature modules
(fees, courses, pricing, ...) with a thin Flask controller layer over
service/repository layers. All money arithmetic goes through ``fees.calculator``.
"""
