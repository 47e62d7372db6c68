"""Deployed bytecode of the staking contract.

Attached unchanged to the predeployed account; never executed or analysed
here.
"""

from __future__ import annotations

_STAKING_CONTRACT_HEX = (
    "6080604052600436106100f75760003560e01c80637dceceb81161008a578063e387a7ed"
    "11610059578063e387a7ed14610381578063e804fbf6146103ac578063f90ecacc146103"
    "d7578063facd743b1461041457610165565b80637dceceb8146102c3578063af6da36e14"
    "610300578063c795c0771461032b578063ca1e78191461035657610165565b8063373d61"
    "32116100c6578063373d6132146102385780633a4b66f114610263578063714ff4251461"
    "026d5780637a6eea371461029857610165565b806302b751991461016a578063065ae171"
    "146101a75780632367f6b5146101e45780632def66201461022157610165565b36610165"
    "5761011b3373ffffffffffffffffffffffffffffffffffffffff16610451565b1561015b"
    "576040517f08c379a0000000000000000000000000000000000000000000000000000000"
    "008152600401610152906111a0565b60405180910390fd5b610163610464565b005b6000"
    "80fd5b34801561017657600080fd5b50610191600480360381019061018c9190610f1e56"
    "5b61053b565b60405161019e91906111fb565b60405180910390f35b3480156101b35760"
    "0080fd5b506101ce60048036038101906101c99190610f1e565b610553565b6040516101"
    "db9190611125565b60405180910390f35b3480156101f057600080fd5b5061020b600480"
    "36038101906102069190610f1e565b610573565b60405161021891906111fb565b604051"
    "80910390f35b34801561022d57600080fd5b506102366105bc565b005b34801561024457"
    "600080fd5b5061024d6106a7565b60405161025a91906111fb565b60405180910390f35b"
    "61026b6106b1565b005b34801561027957600080fd5b5061028261071a565b6040516102"
    "8f91906111fb565b60405180910390f35b3480156102a457600080fd5b506102ad610724"
    "565b6040516102ba91906111e0565b60405180910390f35b3480156102cf57600080fd5b"
    "506102ea60048036038101906102e59190610f1e565b610730565b6040516102f7919061"
    "11fb565b60405180910390f35b34801561030c57600080fd5b50610315610748565b6040"
    "5161032291906111fb565b60405180910390f35b34801561033757600080fd5b50610340"
    "61074e565b60405161034d91906111fb565b60405180910390f35b348015610362576000"
    "80fd5b5061036b610754565b6040516103789190611103565b60405180910390f35b3480"
    "1561038d57600080fd5b506103966107e2565b6040516103a391906111fb565b60405180"
    "910390f35b3480156103b857600080fd5b506103c16107e8565b6040516103ce91906111"
    "fb565b60405180910390f35b3480156103e357600080fd5b506103fe6004803603810190"
    "6103f99190610f4b565b6107f2565b60405161040b91906110e8565b60405180910390f3"
    "5b34801561042057600080fd5b5061043b60048036038101906104369190610f1e565b61"
    "0831565b6040516104489190611125565b60405180910390f35b600080823b9050600081"
    "11915050919050565b34600460008282546104769190611260565b925050819055503460"
    "0260003373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffff"
    "ffffffffffffffffffffff16815260200190815260200160002060008282546104cc9190"
    "611260565b925050819055506104dc33610887565b156104eb576104ea336108ff565b5b"
    "3373ffffffffffffffffffffffffffffffffffffffff167f9e71bc8eea02a63969f50981"
    "8f2dafb9254532904319f9dbda79b67bd34a5f3d3460405161053191906111fb565b6040"
    "5180910390a2565b60036020528060005260406000206000915090505481565b60016020"
    "528060005260406000206000915054906101000a900460ff1681565b6000600260008373"
    "ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffff"
    "ffffffffffff168152602001908152602001600020549050919050565b6105db3373ffff"
    "ffffffffffffffffffffffffffffffffffff16610451565b1561061b576040517f08c379"
    "a00000000000000000000000000000000000000000000000000000000081526004016106"
    "12906111a0565b60405180910390fd5b6000600260003373ffffffffffffffffffffffff"
    "ffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff168152602001"
    "908152602001600020541161069d576040517f08c379a000000000000000000000000000"
    "000000000000000000000000000000815260040161069490611140565b60405180910390"
    "fd5b6106a5610a4e565b565b6000600454905090565b6106d03373ffffffffffffffffff"
    "ffffffffffffffffffffff16610451565b15610710576040517f08c379a0000000000000"
    "000000000000000000000000000000000000000000008152600401610707906111a0565b"
    "60405180910390fd5b610718610464565b565b6000600554905090565b670de0b6b3a764"
    "000081565b60026020528060005260406000206000915090505481565b60065481565b60"
    "055481565b60606000805480602002602001604051908101604052809291908181526020"
    "0182805480156107d857602002820191906000526020600020905b816000905490610100"
    "0a900473ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffff"
    "ffffffffffffffffffff168152602001906001019080831161078e575b50505050509050"
    "90565b60045481565b6000600654905090565b6000818154811061080257600080fd5b90"
    "6000526020600020016000915054906101000a900473ffffffffffffffffffffffffffff"
    "ffffffffffff1681565b6000600160008373ffffffffffffffffffffffffffffffffffff"
    "ffff1673ffffffffffffffffffffffffffffffffffffffff168152602001908152602001"
    "60002060009054906101000a900460ff169050919050565b600061089282610ba0565b15"
    "80156108f85750670de0b6b3a76400006fffffffffffffffffffffffffffffffff166002"
    "60008473ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffff"
    "ffffffffffffffffffff1681526020019081526020016000205410155b9050919050565b"
    "60065460008054905010610948576040517f08c379a00000000000000000000000000000"
    "0000000000000000000000000000815260040161093f90611160565b60405180910390fd"
    "5b60018060008373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffff"
    "ffffffffffffffffffffffffffff16815260200190815260200160002060006101000a81"
    "548160ff021916908315150217905550600080549050600360008373ffffffffffffffff"
    "ffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffffff1681"
    "526020019081526020016000208190555060008190806001815401808255809150506001"
    "90039060005260206000200160009091909190916101000a81548173ffffffffffffffff"
    "ffffffffffffffffffffffff021916908373ffffffffffffffffffffffffffffffffffff"
    "ffff16021790555050565b6000600260003373ffffffffffffffffffffffffffffffffff"
    "ffffff1673ffffffffffffffffffffffffffffffffffffffff1681526020019081526020"
    "016000205490506000600260003373ffffffffffffffffffffffffffffffffffffffff16"
    "73ffffffffffffffffffffffffffffffffffffffff168152602001908152602001600020"
    "819055508060046000828254610ae991906112b6565b92505081905550610af933610ba0"
    "565b15610b0857610b0733610bf6565b5b3373ffffffffffffffffffffffffffffffffff"
    "ffffff166108fc829081150290604051600060405180830381858888f193505050501580"
    "15610b4e573d6000803e3d6000fd5b503373ffffffffffffffffffffffffffffffffffff"
    "ffff167f0f5bb82176feb1b5e747e28471aa92156a04d9f3ab9f45f28e2d704232b93f75"
    "82604051610b9591906111fb565b60405180910390a250565b6000600160008373ffffff"
    "ffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffff"
    "ffffff16815260200190815260200160002060009054906101000a900460ff1690509190"
    "50565b60055460008054905011610c3f576040517f08c379a00000000000000000000000"
    "00000000000000000000000000000000008152600401610c36906111c0565b6040518091"
    "0390fd5b600080549050600360008373ffffffffffffffffffffffffffffffffffffffff"
    "1673ffffffffffffffffffffffffffffffffffffffff1681526020019081526020016000"
    "205410610cc5576040517f08c379a0000000000000000000000000000000000000000000"
    "000000000000008152600401610cbc90611180565b60405180910390fd5b600060036000"
    "8373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffff"
    "ffffffffffffffff16815260200190815260200160002054905060006001600080549050"
    "610d1d91906112b6565b9050808214610e0b576000808281548110610d3b57610d3a6113"
    "ac565b5b9060005260206000200160009054906101000a900473ffffffffffffffffffff"
    "ffffffffffffffffffff1690508060008481548110610d7d57610d7c6113ac565b5b9060"
    "005260206000200160006101000a81548173ffffffffffffffffffffffffffffffffffff"
    "ffff021916908373ffffffffffffffffffffffffffffffffffffffff1602179055508260"
    "0360008373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffff"
    "ffffffffffffffffffffff16815260200190815260200160002081905550505b60006001"
    "60008573ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffff"
    "ffffffffffffffffffff16815260200190815260200160002060006101000a81548160ff"
    "0219169083151502179055506000600360008573ffffffffffffffffffffffffffffffff"
    "ffffffff1673ffffffffffffffffffffffffffffffffffffffff16815260200190815260"
    "2001600020819055506000805480610eba57610eb961137d565b5b600190038181906000"
    "5260206000200160006101000a81549073ffffffffffffffffffffffffffffffffffffff"
    "ff02191690559055505050565b600081359050610f03816114f9565b92915050565b6000"
    "81359050610f1881611510565b92915050565b600060208284031215610f3457610f3361"
    "13db565b5b6000610f4284828501610ef4565b91505092915050565b6000602082840312"
    "15610f6157610f606113db565b5b6000610f6f84828501610f09565b9150509291505056"
    "5b6000610f848383610f90565b60208301905092915050565b610f99816112ea565b8252"
    "5050565b610fa8816112ea565b82525050565b6000610fb982611226565b610fc3818561"
    "123e565b9350610fce83611216565b8060005b83811015610fff578151610fe68882610f"
    "78565b9750610ff183611231565b925050600181019050610fd2565b5085935050505092"
    "915050565b611015816112fc565b82525050565b6000611028601d8361124f565b915061"
    "1033826113e0565b602082019050919050565b600061104b60278361124f565b91506110"
    "5682611409565b604082019050919050565b600061106e60128361124f565b9150611079"
    "82611458565b602082019050919050565b6000611091601a8361124f565b915061109c82"
    "611481565b602082019050919050565b60006110b460408361124f565b91506110bf8261"
    "14aa565b604082019050919050565b6110d381611308565b82525050565b6110e2816113"
    "44565b82525050565b60006020820190506110fd6000830184610f9f565b92915050565b"
    "6000602082019050818103600083015261111d8184610fae565b905092915050565b6000"
    "60208201905061113a600083018461100c565b92915050565b6000602082019050818103"
    "60008301526111598161101b565b9050919050565b600060208201905081810360008301"
    "526111798161103e565b9050919050565b60006020820190508181036000830152611199"
    "81611061565b9050919050565b600060208201905081810360008301526111b981611084"
    "565b9050919050565b600060208201905081810360008301526111d9816110a7565b9050"
    "919050565b60006020820190506111f560008301846110ca565b92915050565b60006020"
    "8201905061121060008301846110d9565b92915050565b60008190506020820190509190"
    "50565b600081519050919050565b6000602082019050919050565b600082825260208201"
    "905092915050565b600082825260208201905092915050565b600061126b82611344565b"
    "915061127683611344565b9250827fffffffffffffffffffffffffffffffffffffffffff"
    "ffffffffffffffffffffff038211156112ab576112aa61134e565b5b8282019050929150"
    "50565b60006112c182611344565b91506112cc83611344565b9250828210156112df5761"
    "12de61134e565b5b828203905092915050565b60006112f582611324565b905091905056"
    "5b60008115159050919050565b60006fffffffffffffffffffffffffffffffff82169050"
    "919050565b600073ffffffffffffffffffffffffffffffffffffffff8216905091905056"
    "5b6000819050919050565b7f4e487b710000000000000000000000000000000000000000"
    "0000000000000000600052601160045260246000fd5b7f4e487b71000000000000000000"
    "00000000000000000000000000000000000000600052603160045260246000fd5b7f4e48"
    "7b7100000000000000000000000000000000000000000000000000000000600052603260"
    "045260246000fd5b600080fd5b7f4f6e6c79207374616b65722063616e2063616c6c2066"
    "756e6374696f6e000000600082015250565b7f56616c696461746f722073657420686173"
    "20726561636865642066756c6c206360008201527f617061636974790000000000000000"
    "0000000000000000000000000000000000602082015250565b7f696e646578206f757420"
    "6f662072616e67650000000000000000000000000000600082015250565b7f4f6e6c7920"
    "454f412063616e2063616c6c2066756e6374696f6e000000000000600082015250565b7f"
    "56616c696461746f72732063616e2774206265206c657373207468616e20746860008201"
    "527f65206d696e696d756d2072657175697265642076616c696461746f72206e756d6020"
    "82015250565b611502816112ea565b811461150d57600080fd5b50565b61151981611344"
    "565b811461152457600080fd5b5056fea26469706673582212208a8aa21d6df01384c9fc"
    "6d39a32e52ef1c0d18fd3bf9e2fca6ae1cae3d41268864736f6c63430008070033"
)

STAKING_CONTRACT_BYTECODE = bytes.fromhex(_STAKING_CONTRACT_HEX)
