"""NFT and collection models, their validation and NftError."""