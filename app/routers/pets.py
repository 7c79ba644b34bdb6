from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.auth import get_current_user
from app.database import get_db
from app.models.pet import Pet
from app.models.user import User
from app.schemas.pet import PetCreate, PetUpdate, PetResponse

router = APIRouter(prefix="/api/pets", tags=["pets"])


def get_owned_pet(db: Session, pet_id: str, user: User) -> Pet:
    """404 if the pet does not exist, 403 if it belongs to someone else."""
    pet = db.query(Pet).filter(Pet.id == pet_id).first()
    if not pet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    if pet.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You don't have permission to access this pet")
    return pet


@router.get("", response_model=list[PetResponse])
def list_pets(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    pets = db.query(Pet).filter(Pet.user_id == user.id).order_by(Pet.created_at).all()
    return [PetResponse.model_validate(p) for p in pets]


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
def create_pet(body: PetCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    pet = Pet(user_id=user.id, **body.model_dump())
    db.add(pet)
    db.commit()
    db.refresh(pet)
    return PetResponse.model_validate(pet)


@router.put("/{pet_id}", response_model=PetResponse)
def update_pet(
    pet_id: str,
    body: PetUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    pet = get_owned_pet(db, pet_id, user)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(pet, field, value)
    db.commit()
    db.refresh(pet)
    return PetResponse.model_validate(pet)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet(pet_id: str, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Delete a pet together with its calendar events."""
    pet = get_owned_pet(db, pet_id, user)
    db.delete(pet)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
