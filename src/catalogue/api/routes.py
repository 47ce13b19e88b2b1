"""FastAPI endpoints for the Catalogue domain.

Reads are public. Every mutation runs behind ``admin_user``, which first
authenticates the bearer token (401) and then requires the Admin role (403).
"""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddVariantRequest,
    CreateBrandRequest,
    CreateCategoryRequest,
    CreateColorRequest,
    CreateParameterRequest,
    CreateProductRequest,
    CreateTagRequest,
    IdResponse,
    PriceRangeResponse,
    StatusResponse,
    UpdateBrandRequest,
    UpdateCategoryRequest,
    UpdateColorRequest,
    UpdateParameterRequest,
    UpdateProductRequest,
    UpdateTagRequest,
    UpdateVariantRequest,
)
from catalogue.brand.management import CreateBrand, RemoveBrand, UpdateBrand
from catalogue.brand.queries import BrandQuery, get_brand, list_brands
from catalogue.category.management import CreateCategory, RemoveCategory, UpdateCategory
from catalogue.category.queries import CategoryQuery, category_tree, get_category, get_category_by_url, list_categories
from catalogue.color.management import CreateColor, RemoveColor, UpdateColor
from catalogue.color.queries import ColorQuery, get_color, list_colors
from catalogue.parameter.management import CreateParameter, RemoveParameter, UpdateParameter
from catalogue.parameter.queries import ParameterQuery, get_parameter, list_parameters
from catalogue.product.management import (
    AddProductVariant,
    CreateProduct,
    RemoveProduct,
    RemoveProductVariant,
    UpdateProduct,
    UpdateProductVariant,
)
from catalogue.product.queries import (
    ProductQuery,
    get_product,
    get_product_by_url,
    list_products,
    price_range,
    products_under_one_thousand,
)
from catalogue.tag.management import CreateTag, RemoveTag, UpdateTag
from catalogue.tag.queries import TagQuery, get_tag, list_tags
from shared.auth import admin_user

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
parameter_router = APIRouter(prefix="/parameters", tags=["parameters"])
tag_router = APIRouter(prefix="/tags", tags=["tags"])
color_router = APIRouter(prefix="/colors", tags=["colors"])
brand_router = APIRouter(prefix="/brands", tags=["brands"])

_admin = [Depends(admin_user)]


def _json(value):
    return json.dumps(value) if value is not None else None


# --- Product endpoints ---


@product_router.get("")
async def get_products(query: Annotated[ProductQuery, Query()]) -> dict:
    return list_products(query)


@product_router.get("/price-range", response_model=PriceRangeResponse)
async def get_products_price_range(query: Annotated[ProductQuery, Query()]) -> PriceRangeResponse:
    return PriceRangeResponse(**price_range(query))


@product_router.get("/under-one-thousand")
async def get_products_under_one_thousand(query: Annotated[ProductQuery, Query()]) -> dict:
    return products_under_one_thousand(query)


@product_router.get("/by-url/{url}")
async def get_product_with_url(url: str) -> dict:
    return get_product_by_url(url)


@product_router.get("/{product_id}")
async def get_single_product(product_id: str) -> dict:
    return get_product(product_id)


@product_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_product(body: CreateProductRequest) -> IdResponse:
    command = CreateProduct(
        name=body.name,
        url=body.url,
        price=body.price,
        old_price=body.old_price,
        description=body.description,
        available=body.available,
        images=_json(body.images),
        category_id=body.category_id,
        brand_id=body.brand_id,
        color_ids=_json(body.color_ids),
        tag_ids=_json(body.tag_ids),
        parameters=_json([p.model_dump() for p in body.parameters] if body.parameters is not None else None),
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@product_router.put("/{product_id}", dependencies=_admin)
async def update_product(product_id: str, body: UpdateProductRequest) -> dict:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        url=body.url,
        price=body.price,
        old_price=body.old_price,
        description=body.description,
        available=body.available,
        images=_json(body.images),
        category_id=body.category_id,
        brand_id=body.brand_id,
        color_ids=_json(body.color_ids),
        tag_ids=_json(body.tag_ids),
        parameters=_json([p.model_dump() for p in body.parameters] if body.parameters is not None else None),
    )
    current_domain.process(command, asynchronous=False)
    return get_product(product_id)


@product_router.delete("/{product_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.post("/{product_id}/variants", status_code=201, response_model=IdResponse, dependencies=_admin)
async def add_variant(product_id: str, body: AddVariantRequest) -> IdResponse:
    command = AddProductVariant(
        product_id=product_id,
        price=body.price,
        old_price=body.old_price,
        available=body.available,
        color_id=body.color_id,
        images=_json(body.images),
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@product_router.put("/{product_id}/variants/{variant_id}", response_model=StatusResponse, dependencies=_admin)
async def update_variant(product_id: str, variant_id: str, body: UpdateVariantRequest) -> StatusResponse:
    command = UpdateProductVariant(
        product_id=product_id,
        variant_id=variant_id,
        price=body.price,
        old_price=body.old_price,
        available=body.available,
        color_id=body.color_id,
        images=_json(body.images),
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}/variants/{variant_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_variant(product_id: str, variant_id: str) -> StatusResponse:
    current_domain.process(RemoveProductVariant(product_id=product_id, variant_id=variant_id), asynchronous=False)
    return StatusResponse()


# --- Category endpoints ---


@category_router.get("")
async def get_categories(query: Annotated[CategoryQuery, Query()]) -> dict:
    return list_categories(query)


@category_router.get("/tree")
async def get_category_tree() -> list[dict]:
    return category_tree()


@category_router.get("/by-url/{url}")
async def get_category_with_url(url: str) -> dict:
    return get_category_by_url(url)


@category_router.get("/{category_id}")
async def get_single_category(category_id: str) -> dict:
    return get_category(category_id)


@category_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_category(body: CreateCategoryRequest) -> IdResponse:
    command = CreateCategory(
        name=body.name,
        url=body.url,
        image=body.image,
        parent_id=body.parent_id,
        parameter_ids=_json(body.parameter_ids),
    )
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@category_router.put("/{category_id}", dependencies=_admin)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> dict:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        url=body.url,
        image=body.image,
        parent_id=body.parent_id,
        parameter_ids=_json(body.parameter_ids),
    )
    current_domain.process(command, asynchronous=False)
    return get_category(category_id)


@category_router.delete("/{category_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_category(category_id: str) -> StatusResponse:
    current_domain.process(RemoveCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


# --- Parameter endpoints ---


@parameter_router.get("")
async def get_parameters(query: Annotated[ParameterQuery, Query()]) -> dict:
    return list_parameters(query)


@parameter_router.get("/{parameter_id}")
async def get_single_parameter(parameter_id: str) -> dict:
    return get_parameter(parameter_id)


@parameter_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_parameter(body: CreateParameterRequest) -> IdResponse:
    result = current_domain.process(CreateParameter(name=body.name, url=body.url), asynchronous=False)
    return IdResponse(id=result)


@parameter_router.put("/{parameter_id}", dependencies=_admin)
async def update_parameter(parameter_id: str, body: UpdateParameterRequest) -> dict:
    command = UpdateParameter(parameter_id=parameter_id, name=body.name, url=body.url)
    current_domain.process(command, asynchronous=False)
    return get_parameter(parameter_id)


@parameter_router.delete("/{parameter_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_parameter(parameter_id: str) -> StatusResponse:
    current_domain.process(RemoveParameter(parameter_id=parameter_id), asynchronous=False)
    return StatusResponse()


# --- Tag endpoints ---


@tag_router.get("")
async def get_tags(query: Annotated[TagQuery, Query()]) -> dict:
    return list_tags(query)


@tag_router.get("/{tag_id}")
async def get_single_tag(tag_id: str) -> dict:
    return get_tag(tag_id)


@tag_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_tag(body: CreateTagRequest) -> IdResponse:
    result = current_domain.process(CreateTag(name=body.name, url=body.url), asynchronous=False)
    return IdResponse(id=result)


@tag_router.put("/{tag_id}", dependencies=_admin)
async def update_tag(tag_id: str, body: UpdateTagRequest) -> dict:
    current_domain.process(UpdateTag(tag_id=tag_id, name=body.name, url=body.url), asynchronous=False)
    return get_tag(tag_id)


@tag_router.delete("/{tag_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_tag(tag_id: str) -> StatusResponse:
    current_domain.process(RemoveTag(tag_id=tag_id), asynchronous=False)
    return StatusResponse()


# --- Color endpoints ---


@color_router.get("")
async def get_colors(query: Annotated[ColorQuery, Query()]) -> dict:
    return list_colors(query)


@color_router.get("/{color_id}")
async def get_single_color(color_id: str) -> dict:
    return get_color(color_id)


@color_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_color(body: CreateColorRequest) -> IdResponse:
    result = current_domain.process(CreateColor(name=body.name, url=body.url, code=body.code), asynchronous=False)
    return IdResponse(id=result)


@color_router.put("/{color_id}", dependencies=_admin)
async def update_color(color_id: str, body: UpdateColorRequest) -> dict:
    command = UpdateColor(color_id=color_id, name=body.name, url=body.url, code=body.code)
    current_domain.process(command, asynchronous=False)
    return get_color(color_id)


@color_router.delete("/{color_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_color(color_id: str) -> StatusResponse:
    current_domain.process(RemoveColor(color_id=color_id), asynchronous=False)
    return StatusResponse()


# --- Brand endpoints ---


@brand_router.get("")
async def get_brands(query: Annotated[BrandQuery, Query()]) -> dict:
    return list_brands(query)


@brand_router.get("/{brand_id}")
async def get_single_brand(brand_id: str) -> dict:
    return get_brand(brand_id)


@brand_router.post("", status_code=201, response_model=IdResponse, dependencies=_admin)
async def create_brand(body: CreateBrandRequest) -> IdResponse:
    command = CreateBrand(name=body.name, url=body.url, image=body.image, show_on_main=body.show_on_main)
    result = current_domain.process(command, asynchronous=False)
    return IdResponse(id=result)


@brand_router.put("/{brand_id}", dependencies=_admin)
async def update_brand(brand_id: str, body: UpdateBrandRequest) -> dict:
    command = UpdateBrand(
        brand_id=brand_id,
        name=body.name,
        url=body.url,
        image=body.image,
        show_on_main=body.show_on_main,
    )
    current_domain.process(command, asynchronous=False)
    return get_brand(brand_id)


@brand_router.delete("/{brand_id}", response_model=StatusResponse, dependencies=_admin)
async def remove_brand(brand_id: str) -> StatusResponse:
    current_domain.process(RemoveBrand(brand_id=brand_id), asynchronous=False)
    return StatusResponse()
