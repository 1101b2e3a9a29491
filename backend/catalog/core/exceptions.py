# backend/catalog/core/exceptions.py

# 모든 작업(조회/생성/수정/삭제)이 같은 방식으로 실패를 알립니다.
# 성공 -> 결과 반환, 실패 -> CatalogError 하위 예외 발생


class CatalogError(Exception):
    code = "catalog_error"
    status_code = 500

    def __init__(self, message: str = "Something went wrong"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ProductNotFoundError(CatalogError):
    code = "product_not_found"
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__(f"Could not find the product (id={product_id})")
        self.product_id = product_id


class InvalidFilterError(CatalogError):
    code = "invalid_filter"
    status_code = 422


class CatalogWriteError(CatalogError):
    code = "write_failed"
    status_code = 500
