class BusinessPlanError(Exception):
    """Base class for business plan domain errors."""


class PlanNotFoundError(BusinessPlanError):
    def __init__(self, plan_id):
        self.plan_id = plan_id
        super().__init__(f"Business plan {plan_id} not found")


class PlanValidationError(BusinessPlanError):
    pass


class ContentDecodeError(BusinessPlanError):
    """Raised in strict mode when a persisted content blob cannot be parsed."""


class InvalidTemplateError(BusinessPlanError, ValueError):
    pass
